import math


def round_half_up(value):
    return math.floor(value + 0.5)


def one_decimal_percent(count, total):
    if total <= 0:
        return 0
    return round_half_up(count / total * 1000) / 10


def tally_category(category, records):
    option_counts = {option.id: 0 for option in category.options}
    total_votes = 0

    for record in records:
        if record.category_id != category.id:
            continue
        total_votes += 1
        if record.option_id in option_counts:
            option_counts[record.option_id] += 1

    option_results = []
    for option in category.options:
        count = option_counts[option.id]
        option_results.append(
            {
                "option": option,
                "votes": count,
                "percentage": one_decimal_percent(count, total_votes),
            }
        )

    # Stable: equal counts keep catalog order.
    option_results.sort(key=lambda row: -row["votes"])

    return {
        "category": category,
        "total_votes": total_votes,
        "option_results": option_results,
        "leading": option_results[0] if total_votes > 0 and option_results else None,
    }


def tally_catalog(categories, records):
    records = list(records)
    return [tally_category(category, records) for category in categories]


def participation_rate(records, baseline=1000):
    total = len(list(records))
    if total == 0 or baseline <= 0:
        return 0
    return round_half_up(total / baseline * 100)
