from voteportal.models import VoteOption, VotingCategory


class CatalogError(ValueError):
    pass


DISTRICTS = (
    ("north", "North District"),
    ("south", "South District"),
    ("east", "East District"),
    ("west", "West District"),
    ("central", "Central District"),
)

DISTRICT_VALUES = frozenset(value for value, _ in DISTRICTS)


def district_label(value):
    return dict(DISTRICTS).get(value, f"{(value or '').capitalize()} District")


DEFAULT_CATALOG_DATA = [
    {
        "id": "president",
        "title": "Presidential Election",
        "description": "Choose your preferred candidate for President",
        "options": [
            {"id": "candidate-a", "name": "Alex Johnson", "party": "Progressive Party"},
            {"id": "candidate-b", "name": "Sarah Chen", "party": "Unity Alliance"},
            {"id": "candidate-c", "name": "Michael Torres", "party": "Reform Coalition"},
            {"id": "candidate-d", "name": "Emma Williams", "party": "Green Future"},
        ],
    },
    {
        "id": "mayor",
        "title": "Mayor Election",
        "description": "Select your choice for City Mayor",
        "options": [
            {"id": "mayor-a", "name": "David Park", "party": "Independent"},
            {"id": "mayor-b", "name": "Lisa Rodriguez", "party": "Citizens First"},
            {"id": "mayor-c", "name": "James Mitchell", "party": "Progress Alliance"},
        ],
    },
    {
        "id": "proposition",
        "title": "Education Funding Proposition",
        "description": "Should the city increase education funding by 15%?",
        "options": [
            {"id": "prop-yes", "name": "Yes - Support Education", "party": "Pro-Education"},
            {"id": "prop-no", "name": "No - Maintain Current", "party": "Fiscal Conservative"},
        ],
    },
]


def validate_catalog(categories):
    seen_categories = set()
    for category in categories:
        if category.id in seen_categories:
            raise CatalogError(f"Duplicate category id: {category.id!r}")
        seen_categories.add(category.id)

        if not category.options:
            raise CatalogError(f"Category {category.id!r} has no options.")

        seen_options = set()
        for option in category.options:
            if option.id in seen_options:
                raise CatalogError(
                    f"Duplicate option id {option.id!r} in category {category.id!r}"
                )
            seen_options.add(option.id)

    return categories


def build_catalog(raw):
    categories = []
    for entry in raw:
        try:
            options = tuple(
                VoteOption(
                    id=option["id"],
                    name=option["name"],
                    party=option.get("party", ""),
                )
                for option in entry.get("options") or ()
            )
            category = VotingCategory(
                id=entry["id"],
                title=entry["title"],
                description=entry.get("description", ""),
                options=options,
            )
        except KeyError as exc:
            raise CatalogError(f"Catalog entry is missing field {exc.args[0]!r}") from exc
        categories.append(category)

    return tuple(validate_catalog(categories))


DEFAULT_CATALOG = build_catalog(DEFAULT_CATALOG_DATA)


def find_category(categories, category_id):
    return next((category for category in categories if category.id == category_id), None)
