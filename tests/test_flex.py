import logging

import pytest
from pytest import raises

from danmaku.uikit import (AlignItem, Direction, Flex, FlexWrap, Justify,
                           UnsupportedLayoutOption, View)
from danmaku.utils import round_half_up


def make_container(flex: Flex, size, *child_sizes):
    container = View(flex)
    container.set_size(*size)
    children = []
    for child_size in child_sizes:
        child = View()
        child.set_size(*child_size)
        container.add_child(child)
        children.append(child)
    return container, children


def spans(views):
    return [view.rect.span for view in views]


def test_center():
    flex = Flex(justify=Justify.Center)
    container, children = make_container(flex, (100, 50), (20, 50), (20, 50))
    container.layout()
    assert spans(children) == [(30, 0, 50, 50), (50, 0, 70, 50)]


def test_start_and_end():
    flex = Flex(justify=Justify.Start)
    container, children = make_container(flex, (100, 50), (20, 50), (30, 50))
    container.layout()
    assert spans(children) == [(0, 0, 20, 50), (20, 0, 50, 50)]

    flex.justify = Justify.End
    container.layout()
    assert spans(children) == [(50, 0, 70, 50), (70, 0, 100, 50)]


def test_space_between():
    flex = Flex(justify=Justify.SpaceBetween)
    container, children = make_container(
        flex, (100, 50), (20, 50), (20, 50), (20, 50)
    )
    container.layout()
    assert [child.rect.left for child in children] == [0, 40, 80]
    # no space is lost at the end
    assert children[-1].rect.right == 100


def test_space_between_single_child():
    flex = Flex(justify=Justify.SpaceBetween)
    container, (child,) = make_container(flex, (100, 50), (40, 50))
    container.layout()
    assert child.rect.span == (0, 0, 40, 50)


def test_space_around():
    flex = Flex(justify=Justify.SpaceAround)
    container, children = make_container(flex, (100, 50), (20, 50), (20, 50))
    container.layout()
    assert spans(children) == [(15, 0, 35, 50), (65, 0, 85, 50)]
    # half a spacing on each end
    assert children[0].rect.left == 100 - children[-1].rect.right


@pytest.mark.parametrize("justify", list(Justify))
def test_no_children(justify):
    container, _ = make_container(Flex(justify=justify), (100, 50))
    container.layout()
    assert container.children == ()


def test_negative_free_space():
    flex = Flex(justify=Justify.Center)
    container, children = make_container(flex, (30, 50), (20, 50), (20, 50))
    container.layout()
    assert spans(children) == [(-5, 0, 15, 50), (15, 0, 35, 50)]


def test_align_items():
    flex = Flex(justify=Justify.Start)
    container, (child,) = make_container(flex, (100, 50), (20, 20))
    expected = {AlignItem.Start: 0, AlignItem.End: 30, AlignItem.Center: 15}
    for align, top in expected.items():
        flex.align_items = align
        container.layout()
        assert child.rect.top == top
        assert child.rect.height == 20


def test_full_cross_size_ignores_alignment():
    flex = Flex(direction=Direction.Row, align_items=AlignItem.End)
    container, (child,) = make_container(flex, (100, 50), (20, 50))
    container.layout()
    assert (child.rect.top, child.rect.bottom) == (0, container.rect.height)


def test_column():
    flex = Flex(
        direction=Direction.Column, justify=Justify.Start, align_items=AlignItem.Center
    )
    container, children = make_container(flex, (50, 100), (20, 20), (50, 30))
    container.layout()
    assert spans(children) == [(15, 0, 35, 20), (0, 20, 50, 50)]


def test_rounding():
    assert round_half_up(24.5) == 25
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0
    assert round_half_up(24.49) == 24

    # remaining free space is 49 so the child starts at 24.5
    flex = Flex(justify=Justify.Center, align_items=AlignItem.Center)
    container, (child,) = make_container(flex, (69, 21), (20, 10))
    container.layout()
    # every edge is rounded on its own (cross offset is 5.5)
    assert child.rect.span == (25, 6, 45, 16)


def test_idempotent():
    flex = Flex(justify=Justify.SpaceAround, align_items=AlignItem.Center)
    container, children = make_container(
        flex, (101, 33), (17, 10), (23, 12), (9, 33)
    )
    container.layout()
    first = spans(children)
    container.layout()
    assert spans(children) == first


def test_recursive_layout():
    outer = Flex(justify=Justify.Start, align_items=AlignItem.Start)
    inner = Flex(
        direction=Direction.Column, justify=Justify.End, align_items=AlignItem.Start
    )
    container, (inner_view,) = make_container(outer, (200, 100), (50, 60))
    inner_view.handler = inner
    grandchild = View()
    grandchild.set_size(10, 10)
    inner_view.add_child(grandchild)

    container.layout()
    assert inner_view.rect.span == (0, 0, 50, 60)
    assert grandchild.rect.span == (0, 50, 10, 60)

    inner_view.set_size(50, 80)
    container.layout()
    assert grandchild.rect.span == (0, 70, 10, 80)


def test_load_sets_size():
    flex = Flex(120, 80)
    container = View(flex)
    container.load()
    assert container.rect.size == (120, 80)


def test_defaults():
    flex = Flex()
    assert flex.direction is Direction.Row
    assert flex.wrap is FlexWrap.NoWrap
    assert flex.justify is Justify.Center
    assert flex.align_items is AlignItem.Center


def test_unsupported_wrap():
    for wrap in (FlexWrap.Wrap, FlexWrap.WrapReverse):
        flex = Flex(wrap=wrap)
        container, (child,) = make_container(flex, (100, 50), (20, 20))
        with raises(UnsupportedLayoutOption) as exc_info:
            container.layout()
        assert exc_info.value.option == "wrap"
        assert exc_info.value.container is container
        # nothing was laid out
        assert child.rect.span == (0, 0, 20, 20)


@pytest.mark.parametrize("option", ["direction", "justify", "align_items"])
def test_unsupported_options(option):
    flex = Flex(justify=Justify.End)
    setattr(flex, option, "center")
    container, (child,) = make_container(flex, (100, 50), (20, 20))
    with raises(UnsupportedLayoutOption) as exc_info:
        container.layout()
    assert exc_info.value.option == option
    assert exc_info.value.value == "center"
    assert child.rect.span == (0, 0, 20, 20)


def test_layout_is_logged(caplog):
    container, _ = make_container(Flex(), (100, 50), (20, 20))
    with caplog.at_level(logging.DEBUG):
        container.layout()
    assert "free space 80" in caplog.text
