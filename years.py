def latest_year_id(sending_year_ids: list[int] | None, receiving_year_ids: list[int] | None) -> int | None:
    # ASSIST lists year ids oldest first, so the last entry is the most recent shared year.
    for year_ids in (sending_year_ids, receiving_year_ids):
        if year_ids:
            return year_ids[-1]

    return None
