from datetime import timedelta, timezone as dt_tz


def add_days(moment, days):
    return moment + timedelta(days=days)


def to_utc_iso(dt):
    return dt.astimezone(dt_tz.utc).isoformat()
