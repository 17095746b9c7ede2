from voteportal.services.voting.tally import one_decimal_percent, round_half_up


def local_hour(timestamp):
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone()
    return timestamp.hour


# Counts are per record, not per voter.
def district_breakdown(records):
    districts = {}
    for record in records:
        district = record.voter_info.district
        districts[district] = districts.get(district, 0) + 1
    return districts


def hourly_pattern(records):
    hourly = {}
    for record in records:
        hour = local_hour(record.timestamp)
        hourly[hour] = hourly.get(hour, 0) + 1
    return dict(sorted(hourly.items()))


def _top_entry(counts):
    if not counts:
        return None
    return min(counts.items(), key=lambda item: (-item[1], item[0]))


def top_district(records):
    return _top_entry(district_breakdown(records))


def peak_hour(records):
    return _top_entry(hourly_pattern(records))


def district_shares(records):
    records = list(records)
    total = len(records)
    return [
        {
            "district": district,
            "votes": count,
            "share": one_decimal_percent(count, total),
        }
        for district, count in district_breakdown(records).items()
    ]


def hourly_timeline(records, limit=8):
    rows = [
        {"hour": hour, "label": f"{hour:02d}:00", "votes": count}
        for hour, count in hourly_pattern(records).items()
    ]
    if limit is not None and limit >= 0:
        rows = rows[-limit:] if limit else []
    return rows


def completion_rate(records, multiplier=1.2):
    # Placeholder figure: there is no count of eligible voters to divide by.
    total = len(list(records))
    if total == 0 or multiplier <= 0:
        return 0
    return round_half_up(total / (total * multiplier) * 100)


def category_flow(categories, records):
    records = list(records)
    flow = []
    for category in categories:
        category_records = [r for r in records if r.category_id == category.id]
        total_votes = len(category_records)

        option_rows = []
        for option in category.options:
            count = sum(1 for r in category_records if r.option_id == option.id)
            option_rows.append(
                {
                    "option": option,
                    "votes": count,
                    "percentage": one_decimal_percent(count, total_votes),
                }
            )

        flow.append(
            {
                "category": category,
                "total_votes": total_votes,
                "option_results": option_rows,
            }
        )
    return flow


def summarize(categories, records, multiplier=1.2, timeline_limit=8):
    records = list(records)
    districts = district_breakdown(records)
    hourly = hourly_pattern(records)

    return {
        "total_records": len(records),
        "districts": districts,
        "hourly": hourly,
        "district_shares": district_shares(records),
        "hourly_timeline": hourly_timeline(records, limit=timeline_limit),
        "max_district_votes": max(list(districts.values()) + [1]),
        "max_hourly_votes": max(list(hourly.values()) + [1]),
        "top_district": _top_entry(districts),
        "peak_hour": _top_entry(hourly),
        "completion_rate": completion_rate(records, multiplier=multiplier),
        "flow": category_flow(categories, records),
    }
