"""Steps shared by the view orchestrators."""

from __future__ import annotations

import logging
from typing import List, Tuple

from podium.config.countries import DEFAULT_ALIASER, CountryAliaser
from podium.ingest import SourceTable
from podium.models import JoinedRecord
from podium.pipeline import by_country, by_discipline, join, name_key, restrict, top_k, totals


logger = logging.getLogger(__name__)


def join_tables(
    roster: SourceTable,
    medals: SourceTable,
    *,
    aliaser: CountryAliaser | None = None,
) -> List[JoinedRecord]:
    """Resolve each medal row to the country of the roster athlete it names."""

    aliaser = aliaser or DEFAULT_ALIASER
    return join(
        roster.rows,
        medals.rows,
        name_key(roster.reversed),
        name_key(medals.reversed),
        value=aliaser.country_of,
    )


def narrow(records: List[JoinedRecord], k: int) -> Tuple[List[str], List[str], List[JoinedRecord]]:
    """Top-K countries and disciplines, and the records inside both sets."""

    countries = top_k(totals(records, by_country), k)
    disciplines = top_k(totals(records, by_discipline), k)
    kept = restrict(records, by_country, countries, by_discipline, disciplines)
    logger.debug(
        "Narrowed %d records to %d (%d countries, %d disciplines)",
        len(records),
        len(kept),
        len(countries),
        len(disciplines),
    )
    return countries, disciplines, kept
