"""Tests for the rule and province sources and their factories."""

from __future__ import annotations

import re
import threading
from pathlib import Path

import pytest

from ryandata_postcode_utils.data import (
    PROVINCES_CSV_ENV,
    RULES_CSV_ENV,
    CSVProvinceSource,
    CSVRuleSource,
    ProvinceSourceFactory,
    RuleSourceFactory,
    get_rule,
)
from ryandata_postcode_utils.protocols import ProvinceSourceProtocol, RuleSourceProtocol

RULES_HEADER = (
    "country_code,country_name,country_name_cn,full_regex,description,format,"
    "range_is_number,range_regex,min_length,left_padding_char,no_post_code,format_fix\n"
)


def _write_rules(path: Path, *rows: str) -> Path:
    path.write_text(RULES_HEADER + "".join(f"{row}\n" for row in rows), encoding="utf-8")
    return path


class TestBundledRules:
    def test_every_rule_loads_and_compiles(self) -> None:
        source = CSVRuleSource()
        codes = source.country_codes()

        assert len(codes) > 190
        for code in codes:
            rule = source.get_rule(code)
            assert rule is not None
            assert re.fullmatch("[A-Z]{2}", rule.country_code)
            re.compile(rule.full_regex)
            re.compile(rule.range_regex)
            if rule.no_post_code:
                assert not rule.has_format

    def test_lookup_ignores_case_and_whitespace(self) -> None:
        assert get_rule(" us ") is get_rule("US")
        assert get_rule("gb").country_name == "United Kingdom"

    @pytest.mark.parametrize("code", ["", "   ", "ZZ", "USA"])
    def test_unknown_countries(self, code: str) -> None:
        assert get_rule(code) is None

    def test_known_rule_values(self) -> None:
        rule = get_rule("US")

        assert rule.range_is_number
        assert rule.min_length == 5
        assert rule.left_padding_char == "0"
        assert rule.format_fix is None
        assert get_rule("GB").format_fix_name == "gb_inward_split"


class TestCustomRuleFile:
    def test_explicit_path(self, tmp_path: Path) -> None:
        csv_path = _write_rules(
            tmp_path / "rules.csv",
            '"XX","Testland","","^[0-9]{3}$","3 digits","NNN",true,"^[0-9]{3}$",3,"0",false,""',
        )
        source = CSVRuleSource(csv_path)

        assert source.csv_path == csv_path
        assert source.country_codes() == ["XX"]
        assert source.get_rule("xx").min_length == 3

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        csv_path = _write_rules(
            tmp_path / "rules.csv",
            '"QQ","Quux","","^[0-9]{4}$","4 digits","NNNN",true,"^[0-9]{4}$",4,"0",false,""',
        )
        monkeypatch.setenv(RULES_CSV_ENV, str(csv_path))

        assert CSVRuleSource().country_codes() == ["QQ"]
        assert CSVRuleSource(tmp_path / "other.csv").csv_path == tmp_path / "other.csv"

    def test_malformed_rows_are_skipped(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        csv_path = _write_rules(
            tmp_path / "rules.csv",
            '"AA","Bad regex","","^[0-9","x","",false,"",0,"",false,""',
            '"BB","Bad fix","","","x","",false,"",0,"",false,"nope"',
            '"CC","Good","","^[0-9]{2}$","2 digits","NN",true,"^[0-9]{2}$",2,"0",false,""',
        )

        with caplog.at_level("WARNING", logger="ryandata_postcode_utils.data.csv_source"):
            codes = CSVRuleSource(csv_path).country_codes()

        assert codes == ["CC"]
        assert len(caplog.records) == 2

    def test_first_rule_for_a_country_wins(self, tmp_path: Path) -> None:
        csv_path = _write_rules(
            tmp_path / "rules.csv",
            '"XX","First","","","a","",false,"",0,"",false,""',
            '"XX","Second","","","b","",false,"",0,"",false,""',
        )

        assert CSVRuleSource(csv_path).get_rule("XX").country_name == "First"

    def test_clear_cache_reloads(self, tmp_path: Path) -> None:
        csv_path = _write_rules(tmp_path / "rules.csv", '"XX","","","","","",false,"",0,"",false,""')
        source = CSVRuleSource(csv_path)
        assert source.country_codes() == ["XX"]

        _write_rules(csv_path, '"YY","","","","","",false,"",0,"",false,""')
        assert source.country_codes() == ["XX"]

        source.clear_cache()
        assert source.country_codes() == ["YY"]


class TestConcurrentLoading:
    def test_rules_load_once(self) -> None:
        loads: list[int] = []

        class CountingSource(CSVRuleSource):
            def _load_rules(self):  # type: ignore[no-untyped-def]
                loads.append(1)
                return super()._load_rules()

        source = CountingSource()
        barrier = threading.Barrier(8)
        results: list[object] = []

        def lookup() -> None:
            barrier.wait()
            results.append(source.get_rule("US"))

        threads = [threading.Thread(target=lookup) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(loads) == 1
        assert len({id(rule) for rule in results}) == 1

    def test_province_table_loads_once(self) -> None:
        loads: list[int] = []

        class CountingSource(CSVProvinceSource):
            def _load_provinces(self):  # type: ignore[no-untyped-def]
                loads.append(1)
                return super()._load_provinces()

        source = CountingSource()
        for _ in range(3):
            source.get_provinces("us")
            source.get_provinces("DE")

        assert loads == [1]
        source.clear_cache()
        source.get_provinces("US")
        assert loads == [1, 1]

    def test_unknown_countries_are_not_cached(self) -> None:
        source = CSVProvinceSource()
        known = source.country_codes()

        for code in ("ZZ1", "ZZ2", "ZZ3", "", "  de  "):
            assert source.get_provinces(code) == ()

        assert source.country_codes() == known == ["US"]


class TestFactories:
    def test_rule_source_factory_default_and_error(self) -> None:
        source = RuleSourceFactory.create()

        assert isinstance(source, CSVRuleSource)
        assert isinstance(source, RuleSourceProtocol)
        with pytest.raises(ValueError, match="Unknown rule source type"):
            RuleSourceFactory.create("unknown-type")

    def test_province_source_factory_default_and_error(self) -> None:
        source = ProvinceSourceFactory.create()

        assert isinstance(source, CSVProvinceSource)
        assert isinstance(source, ProvinceSourceProtocol)
        with pytest.raises(ValueError, match="Unknown province source type"):
            ProvinceSourceFactory.create("unknown-type")

    def test_register_custom_source(self, tmp_path: Path) -> None:
        class FixedPathSource(CSVRuleSource):
            def __init__(self) -> None:
                super().__init__(
                    _write_rules(
                        tmp_path / "fixed.csv", '"XX","","","","","",false,"",0,"",false,""'
                    )
                )

        RuleSourceFactory.register("fixed", FixedPathSource)
        try:
            assert "fixed" in RuleSourceFactory.available_types()
            assert RuleSourceFactory.create("fixed").country_codes() == ["XX"]
        finally:
            RuleSourceFactory.unregister("fixed")

        assert "fixed" not in RuleSourceFactory.available_types()

    def test_create_passes_arguments(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "provinces.csv"
        csv_path.write_text(
            'country_code,code,en_name,cn_name,local_name,aliases\n"CA","ON","Ontario","","",""\n',
            encoding="utf-8",
        )

        source = ProvinceSourceFactory.create("csv", csv_path=csv_path)

        assert [p.code for p in source.get_provinces("CA")] == ["ON"]
        assert PROVINCES_CSV_ENV == "RYANDATA_PROVINCES_CSV"
