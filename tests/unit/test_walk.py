from application import TaxonomyEngine


def _recorder():
    events: list[tuple[str, object]] = []
    hooks = {
        "on_level_start": lambda level: events.append(("level_start", level)),
        "on_level_end": lambda level: events.append(("level_end", level)),
        "on_node_start": lambda node: events.append(("node_start", node.data)),
        "on_node_end": lambda node: events.append(("node_end", node.data)),
    }
    return events, hooks


def _three_level_chain() -> TaxonomyEngine:
    tax = TaxonomyEngine()
    root = tax.add_node({"data": "root"})
    child = tax.add_node({"data": "child"}, root)
    tax.add_node({"data": "grandchild"}, child)
    return tax


def _count(events, kind: str) -> int:
    return sum(1 for name, _ in events if name == kind)


def test_walk_fires_each_hook_three_times_on_three_level_chain() -> None:
    events, hooks = _recorder()
    _three_level_chain().walk(hooks)

    assert _count(events, "node_start") == 3
    assert _count(events, "node_end") == 3
    assert _count(events, "level_start") == 3
    assert _count(events, "level_end") == 3


def test_walk_event_order() -> None:
    events, hooks = _recorder()
    _three_level_chain().walk(hooks)

    assert events == [
        ("level_start", 1),
        ("node_start", "root"),
        ("level_start", 2),
        ("node_start", "child"),
        ("level_start", 3),
        ("node_start", "grandchild"),
        ("node_end", "grandchild"),
        ("level_end", 3),
        ("node_end", "child"),
        ("level_end", 2),
        ("node_end", "root"),
        ("level_end", 1),
    ]


def test_walk_max_depth_truncates_before_grandchildren() -> None:
    events, hooks = _recorder()
    _three_level_chain().walk(hooks, max_depth=2)

    assert ("node_start", "grandchild") not in events
    assert events == [
        ("level_start", 1),
        ("node_start", "root"),
        ("level_start", 2),
        ("node_start", "child"),
        ("node_end", "root"),
        ("level_end", 1),
    ]


def test_walk_max_depth_abandons_remaining_siblings() -> None:
    tax = TaxonomyEngine()
    root = tax.add_node({"data": "root"})
    tax.add_node({"data": "a"}, root)
    tax.add_node({"data": "b"}, root)
    events, hooks = _recorder()

    tax.walk(hooks, max_depth=2)

    assert ("node_start", "a") in events
    assert ("node_start", "b") not in events
    assert ("node_end", "a") not in events
    assert ("level_end", 2) not in events


def test_walk_ignores_unknown_and_missing_hooks() -> None:
    seen: list[str] = []
    _three_level_chain().walk({"bogus": lambda *_: seen.append("bogus"), "on_node_start": lambda n: seen.append(n.data)})

    assert seen == ["root", "child", "grandchild"]


def test_walk_accepts_hook_object() -> None:
    class Counter:
        def __init__(self) -> None:
            self.levels: list[int] = []

        def on_level_start(self, level: int) -> None:
            self.levels.append(level)

    counter = Counter()
    _three_level_chain().walk(counter)

    assert counter.levels == [1, 2, 3]


def test_walk_skips_node_hooks_for_root_without_data() -> None:
    tax = TaxonomyEngine()
    root = tax.add_node({"data": ""})
    tax.add_node({"data": "child"}, root)
    events, hooks = _recorder()

    tax.walk(hooks)

    assert ("node_start", "") not in events
    assert ("node_start", "child") in events


def test_walk_empty_tree() -> None:
    events, hooks = _recorder()
    TaxonomyEngine().walk(hooks)
    assert events == [("level_start", 1), ("level_end", 1)]
