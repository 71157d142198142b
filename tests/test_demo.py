import logging

import pytest

from llrb.demo import demo, main


def demo_messages(caplog):
    return [record.getMessage() for record in caplog.records if record.name == "llrb.demo"]


def test_demo_removes_min_and_max(caplog):
    caplog.set_level(logging.INFO, logger="llrb.demo")

    tree = demo(count=10, seed=7)

    assert tree.size() <= 8
    tree.validate()
    messages = demo_messages(caplog)
    assert messages[0].startswith("insertion order:")
    assert messages[-1] == f"after removing max and min: {tree.keys()}"


@pytest.mark.parametrize("count", [0, 1])
def test_demo_small_trees(count):
    tree = demo(count=count, seed=1)

    assert tree.is_empty()


def test_main_parses_arguments(caplog):
    caplog.set_level(logging.INFO, logger="llrb.demo")

    main(["--count", "5", "--seed", "3", "--low", "0", "--high", "999"])

    messages = demo_messages(caplog)
    assert any(m.startswith("size: ") for m in messages)
    assert any(m.startswith("keys in range [0...999]: ") for m in messages)
