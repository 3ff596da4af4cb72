"""Tests for the display-name extractors, the assembler, the batch runner and the writers."""

from __future__ import annotations

import copy
import json
import time
from pathlib import Path
from typing import Dict, List

import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.displaynames.assemble import assemble_locale_record
from src.displaynames.batch import extract_display_names
from src.displaynames.errors import MissingFieldError, MissingRequiredFieldError
from src.displaynames.extractors import (
    ParsedKey,
    extract_currency_styles,
    extract_date_field_styles,
    extract_language_styles,
    parse_key,
    split_styles,
)
from src.displaynames.extractors.keys import FIELD_MARKERS
from src.displaynames.io import load_locale_record, write_locale_database
from src.displaynames.records import RawLocaleData


# ---------------------------------------------------------------------------
# Helper fixtures and utilities


def _raw_locale(**overrides: object) -> RawLocaleData:
    payload: Dict[str, object] = {
        "languages": {
            "en": "English",
            "en-US": "American English",
            "en-GB": "British English",
            "en-GB-alt-short": "UK English",
            "zh-Hans": "Simplified Chinese",
            "az-alt-short": "Azeri",
        },
        "territories": {
            "US": "United States",
            "US-alt-short": "US",
            "GB": "United Kingdom",
            "GB-alt-short": "UK",
            "CD-alt-variant": "Congo (Republic)",
        },
        "scripts": {"Latn": "Latin", "Hans": "Simplified Han", "Hans-alt-stand-alone": "Simplified Han"},
        "locale_display_names": {
            "localeDisplayPattern": {
                "localePattern": "{0} ({1})",
                "localeSeparator": "{0}, {1}",
                "localeKeyTypeSeparator": "{0}: {1}",
            },
            "types": {"calendar": {"gregorian": "Gregorian Calendar", "iso8601": "ISO-8601 Calendar"}},
        },
        "currencies": {
            "USD": {"displayName": "US Dollar", "symbol": "$", "displayName-count-one": "US dollar"},
            "EUR": {"displayName": "Euro", "symbol": "€"},
        },
        "date_fields": {
            "week": {"displayName": "week", "relative-type-0": "this week"},
            "week-short": {"displayName": "wk."},
            "year-narrow": {"displayName": "yr"},
            "zone": {"displayName": "time zone"},
            "sun": {"relative-type-0": "this Sunday"},
        },
    }
    payload.update(overrides)
    return RawLocaleData(**payload)  # type: ignore[arg-type]


class FakeSource:
    """In-memory data source; locales listed in ``broken`` lack a currency display name."""

    def __init__(self, locales: List[str], broken: tuple = (), delays: Dict[str, float] | None = None) -> None:
        self.locales = locales
        self.broken = set(broken)
        self.delays = delays or {}
        self.fetched: List[str] = []

    def available_locales(self) -> List[str]:
        return list(self.locales)

    def fetch(self, locale: str) -> RawLocaleData:
        time.sleep(self.delays.get(locale, 0.0))
        self.fetched.append(locale)
        if locale in self.broken:
            return _raw_locale(currencies={"XXX": {"symbol": "¤"}})
        return _raw_locale()


# ---------------------------------------------------------------------------
# Key parsing


def test_parse_key_alt_markers() -> None:
    assert parse_key("GB") == ParsedKey("GB", "long")
    assert parse_key("GB-alt-short").width == "short"
    assert parse_key("GB-alt-short").base == "GB"
    assert parse_key("en-alt-narrow-x").base == "en"
    assert parse_key("en-alt-narrow-x").width == "narrow"
    assert parse_key("CD-alt-variant").width == "unsupported-alt"
    assert not parse_key("en-alt-long").supported


def test_parse_key_field_markers_have_no_unsupported_alternates() -> None:
    assert parse_key("dayperiod-narrow", FIELD_MARKERS).base == "dayperiod"
    assert parse_key("week-short", FIELD_MARKERS).width == "short"
    assert parse_key("weekOfMonth", FIELD_MARKERS).width == "long"


# ---------------------------------------------------------------------------
# StyleSplitter


def test_split_styles_without_markers_keeps_everything_long() -> None:
    record = {"US": "United States", "GB": "United Kingdom", "419": "Latin America"}
    assert split_styles(record) == {"long": record, "short": {}, "narrow": {}}


def test_split_styles_routes_short_and_narrow_variants() -> None:
    buckets = split_styles(
        {
            "US-alt-short": "US",
            "US-alt-narrow": "U.S.",
            "GB": "United Kingdom",
        }
    )
    assert buckets["short"] == {"US": "US"}
    assert buckets["narrow"] == {"US": "U.S."}
    assert "US" not in buckets["long"]
    assert buckets["long"] == {"GB": "United Kingdom"}


def test_split_styles_drops_unrecognized_alternates() -> None:
    buckets = split_styles({"CD-alt-variant": "Congo (Republic)", "en-alt-long": "English (long)"})
    for width in ("long", "short", "narrow"):
        assert buckets[width] == {}


def test_split_styles_documents_alt_long_gap() -> None:
    # -alt-long keys have no slot in the output schema and are dropped on purpose.
    buckets = split_styles({"en": "English", "en-alt-long": "English language"})
    assert buckets["long"] == {"en": "English"}


def test_split_styles_empty_record() -> None:
    assert split_styles({}) == {"long": {}, "short": {}, "narrow": {}}


# ---------------------------------------------------------------------------
# CurrencyExtractor


def test_currency_styles_use_display_name() -> None:
    assert extract_currency_styles("en", {"USD": {"displayName": "US Dollar"}}) == {
        "long": {"USD": "US Dollar"},
        "short": {},
        "narrow": {},
    }


def test_currency_without_display_name_fails() -> None:
    with pytest.raises(MissingRequiredFieldError) as excinfo:
        extract_currency_styles("en", {"USD": {}})
    assert excinfo.value.key == "USD"
    assert excinfo.value.locale == "en"
    assert "USD" in str(excinfo.value)
    assert "en" in str(excinfo.value)


def test_missing_field_error_alias() -> None:
    assert MissingFieldError is MissingRequiredFieldError


# ---------------------------------------------------------------------------
# DateTimeFieldExtractor


def test_date_field_styles_rename_and_skip() -> None:
    result = extract_date_field_styles(
        {"week": {"displayName": "week"}, "week-short": {"displayName": "wk."}, "zone": {}}
    )
    assert result == {"long": {"weekOfYear": "week"}, "short": {"weekOfYear": "wk."}, "narrow": {}}


def test_date_field_styles_pass_unknown_keys_through() -> None:
    result = extract_date_field_styles(
        {
            "zone-narrow": {"displayName": "zone"},
            "dayperiod": {"displayName": "AM/PM"},
            "fri-short": {"relative-type-0": "this Fri."},
        }
    )
    assert result["narrow"] == {"timeZoneName": "zone"}
    assert result["long"] == {"dayperiod": "AM/PM"}
    assert result["short"] == {}


def test_date_field_styles_accept_custom_table() -> None:
    result = extract_date_field_styles({"era": {"displayName": "era"}}, key_map={"era": "eraName"})
    assert result["long"] == {"eraName": "era"}


# ---------------------------------------------------------------------------
# LanguageExtractor


def test_language_styles_standard_composite() -> None:
    result = extract_language_styles({"en": "English", "en-US": "American English"}, {"US": "United States"})
    assert result["dialect"]["long"]["en-US"] == "American English"
    assert result["standard"]["long"]["en-US"] == "English (United States)"
    assert result["standard"]["long"]["en"] == "English"


def test_language_styles_unresolved_region_keeps_dialect_name() -> None:
    result = extract_language_styles({"fr": "French", "fr-CA": "Canadian French"}, {})
    assert result["standard"]["long"]["fr-CA"] == "Canadian French"


def test_language_styles_unknown_language_subtag_keeps_dialect_name() -> None:
    result = extract_language_styles({"xx-US": "Xish American"}, {"US": "United States"})
    assert result["standard"]["long"]["xx-US"] == "Xish American"


def test_language_styles_script_subtag_is_not_a_region() -> None:
    result = extract_language_styles({"zh": "Chinese", "zh-Hans": "Simplified Chinese"}, {"CN": "China"})
    assert result["standard"]["long"]["zh-Hans"] == "Simplified Chinese"


def test_language_styles_standard_uses_stripped_key_for_alternates() -> None:
    languages = {"en": "English", "en-GB": "British English", "en-GB-alt-short": "UK English"}
    regions = {"GB": "United Kingdom", "GB-alt-short": "UK"}
    result = extract_language_styles(languages, regions)
    assert result["dialect"]["short"] == {"en-GB": "UK English"}
    assert result["standard"]["short"] == {"en-GB": "English (United Kingdom)"}


def test_language_styles_drop_unsupported_alternates_from_both_flavours() -> None:
    result = extract_language_styles({"en": "English", "en-alt-long": "English (long)"}, {})
    for flavour in ("dialect", "standard"):
        assert "en-alt-long" not in result[flavour]["long"]
        assert result[flavour]["long"] == {"en": "English"}


# ---------------------------------------------------------------------------
# LocaleRecordAssembler


def test_assemble_locale_record_shape() -> None:
    record = assemble_locale_record("en", _raw_locale())

    assert set(record) == {"types", "patterns"}
    assert set(record["types"]) == {"language", "region", "script", "currency", "calendar", "dateTimeField"}
    assert record["types"]["region"]["short"] == {"US": "US", "GB": "UK"}
    assert "CD" not in record["types"]["region"]["long"]
    assert record["types"]["script"]["long"] == {"Latn": "Latin", "Hans": "Simplified Han"}
    assert record["types"]["calendar"]["long"]["gregorian"] == "Gregorian Calendar"
    assert record["types"]["currency"]["long"] == {"USD": "US Dollar", "EUR": "Euro"}
    assert record["types"]["dateTimeField"]["narrow"] == {"year": "yr"}
    assert record["types"]["language"]["standard"]["long"]["en-GB"] == "English (United Kingdom)"
    assert record["patterns"] == {"locale": "{0} ({1})"}


def test_assemble_locale_record_propagates_missing_field() -> None:
    with pytest.raises(MissingRequiredFieldError):
        assemble_locale_record("en", _raw_locale(currencies={"USD": {"displayName": ""}}))


def test_assemble_locale_record_does_not_mutate_input() -> None:
    raw = _raw_locale()
    before = copy.deepcopy(raw)
    assemble_locale_record("en", raw)
    assert raw == before


# ---------------------------------------------------------------------------
# BatchExtractor


def test_extract_display_names_defaults_to_available_locales() -> None:
    source = FakeSource(["en", "de", "fr"])

    database = extract_display_names(source, progress=False)

    assert list(database) == ["en", "de", "fr"]
    assert sorted(source.fetched) == ["de", "en", "fr"]


def test_extract_display_names_keeps_request_order() -> None:
    source = FakeSource(["a", "b", "c"], delays={"a": 0.05})

    database = extract_display_names(source, ["a", "b", "c", "b"], max_workers=3, progress=False)

    assert list(database) == ["a", "b", "c"]
    assert sorted(source.fetched) == ["a", "b", "c"]


def test_extract_display_names_fail_fast() -> None:
    source = FakeSource(["en", "xx"], broken=("xx",))

    with pytest.raises(MissingRequiredFieldError) as excinfo:
        extract_display_names(source, progress=False)
    assert excinfo.value.locale == "xx"
    assert excinfo.value.key == "XXX"


def test_extract_display_names_skip_policy(capsys: pytest.CaptureFixture[str]) -> None:
    source = FakeSource(["en", "xx", "de"], broken=("xx",))

    database = extract_display_names(source, policy="skip", progress=False)

    assert list(database) == ["en", "de"]
    assert "Skipping locale xx" in capsys.readouterr().out


def test_extract_display_names_rejects_bad_arguments() -> None:
    source = FakeSource(["en"])
    with pytest.raises(ValueError):
        extract_display_names(source, policy="ignore", progress=False)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        extract_display_names(source, max_workers=0, progress=False)


def test_extract_display_names_empty_selection() -> None:
    assert extract_display_names(FakeSource([]), [], progress=False) == {}


def test_extract_display_names_is_idempotent() -> None:
    source = FakeSource(["en", "de", "ja"], delays={"en": 0.02})

    first = extract_display_names(source, progress=False)
    second = extract_display_names(source, progress=False)

    assert first == second
    assert json.dumps(first, sort_keys=True) == json.dumps(second, sort_keys=True)


# ---------------------------------------------------------------------------
# Persistence


def test_locale_record_round_trip(tmp_path: Path) -> None:
    database = {"en": assemble_locale_record("en", _raw_locale())}

    written = write_locale_database(database, tmp_path / "out")

    assert written == [tmp_path / "out" / "en.json"]
    loaded = load_locale_record("en", tmp_path / "out")
    assert loaded == database["en"]
    for width in ("long", "short", "narrow"):
        assert set(loaded["types"]["region"][width]) == set(database["en"]["types"]["region"][width])


def test_load_locale_record_rejects_foreign_payload(tmp_path: Path) -> None:
    (tmp_path / "en.json").write_text(json.dumps({"hello": "world"}), encoding="utf-8")
    with pytest.raises(TypeError):
        load_locale_record("en", tmp_path)
