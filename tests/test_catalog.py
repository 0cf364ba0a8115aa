import pytest

from papercraft.catalog import TEMPLATES, UnknownTemplateError, get_template, select_template
from papercraft.config import PatternType
from papercraft.patterns import RECIPES


def test_template_ids_are_unique() -> None:
    ids = [template.id for template in TEMPLATES]
    assert len(ids) == len(set(ids))
    assert len(ids) >= 25


def test_every_template_renders_with_a_known_pattern() -> None:
    for template in TEMPLATES:
        assert template.pattern in RECIPES or template.pattern in (PatternType.BLANK, PatternType.CHILDREN_DRAWING)


def test_calligraphy_templates_use_narrow_margins() -> None:
    tianzi = get_template("tianzi")

    assert tianzi.pattern == PatternType.TIANZI
    assert tianzi.margins.left == 9
    assert tianzi.background.color == "#FFF8E6"


def test_select_template_keeps_caller_id() -> None:
    selected = select_template("grid-math", "custom-1234")

    assert selected.id == "custom-1234"
    assert selected.pattern == PatternType.GRID
    assert get_template("grid-math").id == "grid-math"


def test_unknown_template_raises() -> None:
    with pytest.raises(UnknownTemplateError):
        select_template("no-such-template", "custom-1")
