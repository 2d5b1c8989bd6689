from __future__ import annotations

import csv
import logging
import os
from collections.abc import Iterator
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ryandata_postcode_utils.data.base import BaseProvinceSource, BaseRuleSource
from ryandata_postcode_utils.models import PostcodeRule, ProvinceInfo

logger = logging.getLogger(__name__)

DATA_PACKAGE = "ryandata_postcode_utils.data"
RULES_CSV = "postcode_rules.csv"
PROVINCES_CSV = "provinces.csv"
RULES_CSV_ENV = "RYANDATA_POSTCODE_RULES_CSV"
PROVINCES_CSV_ENV = "RYANDATA_PROVINCES_CSV"

ALIAS_SEPARATOR = "|"


def _resolve_path(csv_path: Union[str, Path] | None, env_var: str) -> Path | None:
    """Pick the explicit path, then the environment override, else None (bundled)."""
    if csv_path:
        return Path(csv_path)
    override = os.environ.get(env_var, "").strip()
    return Path(override) if override else None


def _iter_csv_rows(csv_path: Path | None, bundled_name: str) -> Iterator[dict[str, str]]:
    """Iterate over CSV rows from a custom path or the bundled file.

    Yields:
        Dict for each row in the CSV.
    """
    if csv_path is not None:
        with open(csv_path, encoding="utf-8", newline="") as f:
            yield from csv.DictReader(f)
    else:
        data_file = resources.files(DATA_PACKAGE).joinpath(bundled_name)
        with data_file.open("r", encoding="utf-8", newline="") as f:
            yield from csv.DictReader(f)


class CSVRuleSource(BaseRuleSource):
    """Rule source that loads from a CSV file.

    By default, loads the bundled postcode_rules.csv. A custom file can be
    given directly or through the RYANDATA_POSTCODE_RULES_CSV environment
    variable; an explicit ``csv_path`` wins over the environment.
    """

    def __init__(self, csv_path: Union[str, Path] | None = None) -> None:
        """Initialize CSV rule source.

        Args:
            csv_path: Path to CSV file. If None, uses the environment
                override or the bundled table.
        """
        self._csv_path = _resolve_path(csv_path, RULES_CSV_ENV)
        super().__init__()

    @property
    def csv_path(self) -> Path | None:
        """Custom CSV path in use, or None for the bundled table."""
        return self._csv_path

    def _load_rules(self) -> Iterator[PostcodeRule]:
        for line_no, row in enumerate(_iter_csv_rows(self._csv_path, RULES_CSV), start=2):
            data = dict(row)
            data["format_fix_name"] = (data.pop("format_fix", None) or "").strip()
            try:
                yield PostcodeRule.model_validate(data)
            except ValidationError as exc:
                logger.warning(
                    "Skipping malformed postcode rule on line %d (%s): %s",
                    line_no,
                    row.get("country_code"),
                    exc,
                )


class CSVProvinceSource(BaseProvinceSource):
    """Province source that loads from a CSV file.

    By default, loads the bundled provinces.csv. A custom file can be given
    directly or through the RYANDATA_PROVINCES_CSV environment variable.
    """

    def __init__(self, csv_path: Union[str, Path] | None = None) -> None:
        """Initialize CSV province source.

        Args:
            csv_path: Path to CSV file. If None, uses the environment
                override or the bundled table.
        """
        self._csv_path = _resolve_path(csv_path, PROVINCES_CSV_ENV)
        super().__init__()

    @property
    def csv_path(self) -> Path | None:
        """Custom CSV path in use, or None for the bundled table."""
        return self._csv_path

    def _load_provinces(self) -> Iterator[tuple[str, ProvinceInfo]]:
        for line_no, row in enumerate(_iter_csv_rows(self._csv_path, PROVINCES_CSV), start=2):
            country_code = (row.get("country_code") or "").strip().upper()
            code = (row.get("code") or "").strip()
            if not country_code or not code:
                logger.warning(
                    "Skipping province row on line %d without a country or code", line_no
                )
                continue
            aliases = tuple(
                alias.strip()
                for alias in (row.get("aliases") or "").split(ALIAS_SEPARATOR)
                if alias.strip()
            )
            yield country_code, ProvinceInfo(
                code=code,
                en_name=(row.get("en_name") or "").strip(),
                cn_name=(row.get("cn_name") or "").strip(),
                local_name=(row.get("local_name") or "").strip(),
                aliases=aliases,
            )


@lru_cache(maxsize=1)
def get_default_rule_source() -> CSVRuleSource:
    """Get the default CSV rule source singleton.

    Returns:
        Shared CSVRuleSource instance.
    """
    return CSVRuleSource()


@lru_cache(maxsize=1)
def get_default_province_source() -> CSVProvinceSource:
    """Get the default CSV province source singleton.

    Returns:
        Shared CSVProvinceSource instance.
    """
    return CSVProvinceSource()
