"""Static Austin-area community definitions."""

from src.models.community import Community

# ZCTAs covering the Austin metro; candidate units for community demographics
AUSTIN_ZIP_CODES = [
    "78701", "78702", "78703", "78704", "78705", "78712", "78717", "78719",
    "78721", "78722", "78723", "78724", "78725", "78726", "78727", "78728",
    "78729", "78730", "78731", "78732", "78733", "78734", "78735", "78736",
    "78737", "78738", "78739", "78741", "78742", "78744", "78745", "78746",
    "78747", "78748", "78749", "78750", "78751", "78752", "78753", "78754",
    "78756", "78757", "78758", "78759", "78613", "78641", "78660", "78664",
    "78665", "78681",
]

COMMUNITIES = {
    c.slug: c
    for c in [
        Community(
            slug="hyde-park",
            name="Hyde Park",
            county="Travis",
            polygon=(
                (-97.7330, 30.3020), (-97.7205, 30.3020), (-97.7205, 30.3160),
                (-97.7330, 30.3160),
            ),
        ),
        Community(
            slug="travis-heights",
            name="Travis Heights",
            county="Travis",
            polygon=(
                (-97.7510, 30.2440), (-97.7350, 30.2440), (-97.7350, 30.2560),
                (-97.7440, 30.2610), (-97.7510, 30.2560),
            ),
        ),
        Community(
            slug="mueller",
            name="Mueller",
            county="Travis",
            polygon=(
                (-97.7120, 30.2930), (-97.6960, 30.2930), (-97.6960, 30.3080),
                (-97.7120, 30.3080),
            ),
        ),
        Community(
            slug="tarrytown",
            name="Tarrytown",
            county="Travis",
            polygon=(
                (-97.7780, 30.2900), (-97.7560, 30.2900), (-97.7560, 30.3120),
                (-97.7780, 30.3120),
            ),
        ),
        Community(
            slug="circle-c-ranch",
            name="Circle C Ranch",
            county="Travis",
            polygon=(
                (-97.9000, 30.1750), (-97.8550, 30.1750), (-97.8550, 30.2080),
                (-97.8800, 30.2150), (-97.9000, 30.2050),
            ),
        ),
        Community(
            slug="brushy-creek",
            name="Brushy Creek",
            county="Williamson",
            polygon=(
                (-97.7600, 30.4950), (-97.7150, 30.4950), (-97.7150, 30.5250),
                (-97.7600, 30.5250),
            ),
        ),
    ]
}


class CommunityRegistry:
    def __init__(
        self,
        communities: dict[str, Community] | None = None,
        zip_codes: list[str] | None = None,
    ):
        self.communities = COMMUNITIES if communities is None else communities
        self.zip_codes = AUSTIN_ZIP_CODES if zip_codes is None else zip_codes

    def get_by_slug(self, slug: str) -> Community | None:
        return self.communities.get(slug.lower())

    def candidate_zips(self) -> list[str]:
        return list(self.zip_codes)
