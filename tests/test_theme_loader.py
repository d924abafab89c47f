"""Tests for theme file parsing and validation."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from skinkit.errors import ErrorCode, ThemeError
from skinkit.ui.themes.loader import load_theme_document
from skinkit.ui.themes.models import PropertyValue, ThemeElement
from skinkit.ui.themes.schema import ELEMENT_SCHEMAS, ElementType, PropertyKind
from skinkit.ui.themes.values import Pair


def _write_theme(path: Path, body: str, version: str | None = "3") -> Path:
    version_tag = f"<version>{version}</version>" if version is not None else ""
    path.write_text(f"<theme>{version_tag}{body}</theme>", encoding="utf-8")
    return path


def _load_error(path: Path) -> ThemeError:
    with pytest.raises(ThemeError) as info:
        load_theme_document(path)
    return info.value


def test_load_theme_document_valid(tmp_path: Path) -> None:
    (tmp_path / "art.png").write_bytes(b"")
    theme_file = _write_theme(
        tmp_path / "theme.xml",
        """
        <view name="basic">
            <image name="logo" extra="true">
                <pos>0.5 0.1</pos>
                <size>0.2 0.2</size>
                <origin>0.5 0</origin>
                <path>./art.png</path>
                <tile>true</tile>
            </image>
            <text name="title">
                <text>  Hello  </text>
                <color>FF0000</color>
                <fontSize>0.05</fontSize>
                <center>false</center>
            </text>
        </view>
        <view name="detailed">
            <textlist name="list">
                <selectorColor>000000AA</selectorColor>
            </textlist>
            <sound name="click"><path>/abs/click.wav</path></sound>
        </view>
        """,
    )

    document = load_theme_document(theme_file)

    assert document.version == 3.0
    assert document.source_path == theme_file
    assert list(document.views) == ["basic", "detailed"]

    logo = document.views["basic"].get("logo")
    assert logo is not None
    assert logo.type is ElementType.IMAGE
    assert logo.extra is True
    assert logo.pair("pos") == Pair(0.5, 0.1)
    assert logo.pair("origin") == Pair(0.5, 0.0)
    assert logo.path("path") == (tmp_path / "art.png").as_posix()
    assert logo.flag("tile") is True

    title = document.views["basic"].get("title")
    assert title is not None
    assert title.extra is False
    assert title.string("text") == "  Hello  "
    assert title.color("color") == 0xFF0000FF
    assert title.number("fontSize") == pytest.approx(0.05)
    assert title.flag("center") is False

    listing = document.views["detailed"].get("list")
    assert listing is not None
    assert listing.color("selectorColor") == 0x000000AA
    assert document.views["detailed"].get("click").path("path") == "/abs/click.wav"


def test_every_declared_pair_is_retrievable(tmp_path: Path) -> None:
    body = "".join(
        f'<view name="v{index}"><{kind.value} name="e{index}"/></view>'
        for index, kind in enumerate(ElementType)
    )
    document = load_theme_document(_write_theme(tmp_path / "theme.xml", body))

    for index, kind in enumerate(ElementType):
        element = document.views[f"v{index}"].get(f"e{index}")
        assert element is not None
        assert element.type is kind
        assert dict(element.properties) == {}


class TestStructuralErrors:
    """Failures of the file as a whole."""

    def test_missing_file(self, tmp_path: Path):
        missing = tmp_path / "nope.xml"
        error = _load_error(missing)
        assert error.code is ErrorCode.MISSING_FILE
        assert error.path == missing
        assert str(error) == f'Error loading theme from "{missing}":\n   Missing file!'

    def test_malformed_markup(self, tmp_path: Path):
        theme_file = tmp_path / "theme.xml"
        theme_file.write_text("<theme><version>3</version><view name='a'>", encoding="utf-8")
        error = _load_error(theme_file)
        assert error.code is ErrorCode.MALFORMED_MARKUP
        assert error.message.startswith("XML parsing error")
        assert error.details["description"]

    def test_empty_file_is_malformed(self, tmp_path: Path):
        theme_file = tmp_path / "theme.xml"
        theme_file.write_text("", encoding="utf-8")
        assert _load_error(theme_file).code is ErrorCode.MALFORMED_MARKUP

    def test_missing_root_section(self, tmp_path: Path):
        theme_file = tmp_path / "theme.xml"
        theme_file.write_text("<skin><version>3</version></skin>", encoding="utf-8")
        assert _load_error(theme_file).code is ErrorCode.MISSING_ROOT_SECTION

    def test_missing_version_wins_over_bad_views(self, tmp_path: Path):
        theme_file = _write_theme(
            tmp_path / "theme.xml",
            '<view><bogus name="x"/></view>',
            version=None,
        )
        error = _load_error(theme_file)
        assert error.code is ErrorCode.MISSING_VERSION
        assert "<version>3</version>" in error.message

    def test_blank_version_is_missing(self, tmp_path: Path):
        theme_file = _write_theme(tmp_path / "theme.xml", "", version="  ")
        assert _load_error(theme_file).code is ErrorCode.MISSING_VERSION

    @pytest.mark.parametrize("version", ["2", "2.9", "abc"])
    def test_old_version_rejected(self, tmp_path: Path, version: str):
        theme_file = _write_theme(tmp_path / "theme.xml", '<view name="v"><bogus/></view>', version=version)
        error = _load_error(theme_file)
        assert error.code is ErrorCode.UNSUPPORTED_VERSION
        assert error.details["minimum"] == 3
        assert error.details["actual"] < 3

    def test_newer_version_accepted(self, tmp_path: Path):
        theme_file = _write_theme(tmp_path / "theme.xml", "", version="4")
        assert load_theme_document(theme_file).version == 4.0


class TestSchemaErrors:
    """Failures caused by names missing from the schema."""

    def test_view_missing_name(self, tmp_path: Path):
        theme_file = _write_theme(tmp_path / "theme.xml", '<view><text name="a"/></view>')
        assert _load_error(theme_file).code is ErrorCode.MISSING_NAME

    def test_element_missing_name(self, tmp_path: Path):
        theme_file = _write_theme(tmp_path / "theme.xml", '<view name="basic"><image/></view>')
        error = _load_error(theme_file)
        assert error.code is ErrorCode.MISSING_ELEMENT_NAME
        assert error.details["tag"] == "image"
        assert error.frames == ('view "basic"',)

    def test_unknown_element_type(self, tmp_path: Path):
        theme_file = _write_theme(tmp_path / "theme.xml", '<view name="basic"><video name="a"/></view>')
        error = _load_error(theme_file)
        assert error.code is ErrorCode.UNKNOWN_ELEMENT_TYPE
        assert error.details["tag"] == "video"

    def test_unknown_property_type(self, tmp_path: Path):
        theme_file = _write_theme(
            tmp_path / "theme.xml",
            '<view name="basic"><image name="logo"><color>FFFFFF</color></image></view>',
        )
        error = _load_error(theme_file)
        assert error.code is ErrorCode.UNKNOWN_PROPERTY_TYPE
        assert error.details == {"tag": "color", "element_type": "image", "line": 1}
        assert error.frames == ('image "logo"', 'view "basic"')
        assert 'view "basic" > image "logo": Unknown property type "color"' in str(error)


class TestValueErrors:
    """Failures while converting property text."""

    def test_pair_without_separator(self, tmp_path: Path):
        theme_file = _write_theme(
            tmp_path / "theme.xml",
            '<view name="basic"><image name="logo"><pos>0.5</pos></image></view>',
        )
        error = _load_error(theme_file)
        assert error.code is ErrorCode.INVALID_PAIR
        assert error.frames == ("<pos>", 'image "logo"', 'view "basic"')
        assert str(error).endswith('view "basic" > image "logo" > <pos>: invalid normalized pair ("0.5")')

    def test_bad_color(self, tmp_path: Path):
        theme_file = _write_theme(
            tmp_path / "theme.xml",
            '<view name="basic"><text name="t"><color>FF00</color></text></view>',
        )
        assert _load_error(theme_file).code is ErrorCode.INVALID_COLOR

    def test_empty_color(self, tmp_path: Path):
        theme_file = _write_theme(
            tmp_path / "theme.xml",
            '<view name="basic"><text name="t"><color></color></text></view>',
        )
        assert _load_error(theme_file).code is ErrorCode.EMPTY_COLOR

    def test_lenient_numbers_and_flags(self, tmp_path: Path):
        theme_file = _write_theme(
            tmp_path / "theme.xml",
            """<view name="basic"><text name="t">
                <pos>left top</pos><fontSize>big</fontSize><center>maybe</center>
            </text></view>""",
        )
        element = load_theme_document(theme_file).views["basic"].get("t")
        assert element.pair("pos") == Pair(0.0, 0.0)
        assert element.number("fontSize") == 0.0
        assert element.flag("center") is False


def test_later_element_with_same_name_wins(tmp_path: Path) -> None:
    theme_file = _write_theme(
        tmp_path / "theme.xml",
        """<view name="basic">
            <text name="a"><text>first</text></text>
            <text name="b"><text>other</text></text>
            <text name="a"><text>second</text></text>
        </view>""",
    )
    view = load_theme_document(theme_file).views["basic"]
    assert view.get("a").string("text") == "second"
    assert list(view.elements) == ["b", "a"]


def test_empty_views_are_dropped(tmp_path: Path) -> None:
    theme_file = _write_theme(
        tmp_path / "theme.xml",
        """<view name="empty"></view>
        <view name="comments"><!-- nothing here --></view>
        <view name="full"><sound name="s"/></view>""",
    )
    assert list(load_theme_document(theme_file).views) == ["full"]


def test_comments_inside_elements_are_ignored(tmp_path: Path) -> None:
    theme_file = _write_theme(
        tmp_path / "theme.xml",
        '<view name="v"><!-- c --><text name="t"><!-- c --><text>x</text></text></view>',
    )
    assert load_theme_document(theme_file).views["v"].get("t").string("text") == "x"


def test_missing_path_target_only_warns(tmp_path: Path, caplog) -> None:
    theme_file = _write_theme(
        tmp_path / "theme.xml",
        '<view name="v"><image name="bg"><path>./missing.png</path></image></view>',
    )
    with caplog.at_level(logging.WARNING, logger="skinkit.ui.themes.loader"):
        document = load_theme_document(theme_file)

    expected = (tmp_path / "missing.png").as_posix()
    assert document.views["v"].get("bg").path("path") == expected
    assert "could not find file" in caplog.text
    assert expected in caplog.text


class TestElementInvariants:
    """Schema checks applied when elements are built directly."""

    def test_unknown_property_rejected(self):
        with pytest.raises(ThemeError) as info:
            ThemeElement(
                name="a",
                type=ElementType.SOUND,
                properties={"pos": PropertyValue(PropertyKind.NORMALIZED_PAIR, Pair(0, 0))},
            )
        assert info.value.code is ErrorCode.UNKNOWN_PROPERTY_TYPE

    def test_kind_mismatch_rejected(self):
        with pytest.raises(ThemeError) as info:
            ThemeElement(
                name="a",
                type=ElementType.TEXT,
                properties={"text": PropertyValue(PropertyKind.PATH, "x")},
            )
        assert info.value.code is ErrorCode.PROPERTY_KIND_MISMATCH

    @pytest.mark.parametrize(
        ("kind", "value"),
        [
            (PropertyKind.COLOR, True),
            (PropertyKind.COLOR, -1),
            (PropertyKind.FLOAT, "1.0"),
            (PropertyKind.NORMALIZED_PAIR, (1.0, 2.0)),
        ],
    )
    def test_value_must_match_kind(self, kind, value):
        with pytest.raises(ThemeError):
            PropertyValue(kind, value)

    def test_typed_accessors_only_return_matching_kind(self):
        element = ThemeElement(
            name="t",
            type=ElementType.TEXT,
            properties={"text": PropertyValue(PropertyKind.STRING, "hi")},
        )
        assert element.string("text") == "hi"
        assert element.path("text") is None
        assert element.color("color") is None
        with pytest.raises(TypeError):
            element.properties["text"] = PropertyValue(PropertyKind.STRING, "no")  # type: ignore[index]

    def test_schema_registry_is_immutable(self):
        with pytest.raises(TypeError):
            ELEMENT_SCHEMAS[ElementType.SOUND]["volume"] = PropertyKind.FLOAT  # type: ignore[index]

    def test_elements_are_hashable(self):
        def make():
            return ThemeElement(
                name="t",
                type=ElementType.TEXT,
                properties={"text": PropertyValue(PropertyKind.STRING, "hi")},
            )

        first, second = make(), make()
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1
