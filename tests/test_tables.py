from pathlib import Path

from vispeak.config import DEFAULT_ACRONYMS_PATH, DEFAULT_REPLACEMENTS_PATH
from vispeak.tables import EMPTY_TABLES, Tables, TableStore, load_lookup_table, parse_lookup_csv
from vispeak.text.replacement import EMPTY_TABLE


def test_parse_lookup_csv_skips_header_and_malformed_rows() -> None:
    table = parse_lookup_csv(
        "original,transliteration\n"
        "facebook,phây-búc\n"
        "no comma here\n"
        ",missing key\n"
        "New York,niu-oóc, x\n"
    )

    assert len(table) == 2
    assert table["facebook"] == "phây-búc"
    assert table["new york"] == "niu-oóc, x"


def test_missing_file_yields_empty_table(tmp_path: Path) -> None:
    assert len(load_lookup_table(tmp_path / "absent.csv")) == 0


def test_undecodable_file_yields_empty_table(tmp_path: Path) -> None:
    path = tmp_path / "broken.csv"
    path.write_bytes(b"key,value\n\xff\xfe\xfa,x\n")
    assert len(load_lookup_table(path)) == 0


def test_byte_order_mark_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "bom.csv"
    path.write_text("key,value\nubnd,ủy ban nhân dân\n", encoding="utf-8-sig")
    assert load_lookup_table(path)["ubnd"] == "ủy ban nhân dân"


def test_store_caches_until_invalidated(tmp_path: Path) -> None:
    replacements = tmp_path / "words.csv"
    acronyms = tmp_path / "acronyms.csv"
    replacements.write_text("original,transliteration\nemail,i-meo\n", encoding="utf-8")
    acronyms.write_text("acronym,transliteration\n", encoding="utf-8")

    store = TableStore(replacements, acronyms)
    first = store.get()
    assert store.get() is first
    assert len(first.replacements) == 1
    assert len(first.acronyms) == 0

    replacements.write_text(
        "original,transliteration\nemail,i-meo\nvideo,vi-đi-ô\n", encoding="utf-8"
    )
    assert store.get() is first

    store.invalidate()
    assert len(store.get().replacements) == 2

    acronyms.write_text("acronym,transliteration\nvn,việt nam\n", encoding="utf-8")
    assert len(store.reload().acronyms) == 1


def test_bundled_tables() -> None:
    tables = TableStore(DEFAULT_REPLACEMENTS_PATH, DEFAULT_ACRONYMS_PATH).get()
    assert tables.replacements["facebook"] == "phây-búc"
    assert tables.acronyms["tp.hcm"] == "thành phố hồ chí minh"


def test_default_tables_are_empty() -> None:
    tables = Tables()
    assert tables.replacements is EMPTY_TABLE
    assert tables.acronyms is EMPTY_TABLE
    assert tables == EMPTY_TABLES
