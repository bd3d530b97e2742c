import pytest

from stocksim.models import Goal
from stocksim.parse import (
    ConfigError,
    parse_file,
    parse_goal,
    parse_lines,
    parse_process,
    parse_resource,
    split_process,
)

CONFIG = [
    "# simple config",
    "euro:10",
    "",
    "buy_materiel:(euro:8):(materiel:1):10",
    "build_product:(materiel:1):(product:1):30",
    "optimize:(time;product)",
]


def test_parse_resource():
    r = parse_resource("euro:10")
    assert (r.name, r.quantity) == ("euro", 10)


def test_parse_resource_rejects_process_line():
    with pytest.raises(ConfigError):
        parse_resource("buy:(euro:8):(materiel:1):10")


def test_parse_goal_with_time():
    assert parse_goal("optimize:(time;product)") == Goal("product", True)


def test_parse_goal_without_time():
    assert parse_goal("optimize:(product)") == Goal("product", False)


@pytest.mark.parametrize(
    "text", ["optimize:time;product", "optimize:(a:b)", "optimize:(product) ", "x"]
)
def test_parse_goal_invalid(text):
    with pytest.raises(ConfigError):
        parse_goal(text)


def test_parse_process_single():
    p = parse_process("buy_materiel:(euro:8):(materiel:1):10")
    assert p.name == "buy_materiel"
    assert [(r.name, r.quantity) for r in p.ingredients] == [("euro", 8)]
    assert [(r.name, r.quantity) for r in p.products] == [("materiel", 1)]
    assert p.time == 10


def test_parse_process_multiple_items():
    p = parse_process("mix:(a:1;b:2):(c:3;d:4):5")
    assert [(r.name, r.quantity) for r in p.ingredients] == [("a", 1), ("b", 2)]
    assert [(r.name, r.quantity) for r in p.products] == [("c", 3), ("d", 4)]
    assert p.time == 5


@pytest.mark.parametrize(
    "text", ["mix:(a:1):(c:3)", "mix:(a:1):(c:x):5", "mix:():(c:1):5", "mix:(a:1):(c:1):5x"]
)
def test_parse_process_invalid(text):
    with pytest.raises(ConfigError):
        parse_process(text)


def test_split_process():
    assert split_process("a:(b:1):(c:2):3") == ["a", "b:1", "c:2", "3"]


@pytest.mark.parametrize("line", ["abc", "a:(b:1)", "a:(b:1):(c:2)"])
def test_split_process_invalid(line):
    with pytest.raises(ConfigError, match="invalid line"):
        split_process(line)


def test_parse_lines_full():
    resources, processes, goal = parse_lines(CONFIG)
    assert [(r.name, r.quantity) for r in resources] == [("euro", 10)]
    assert [p.name for p in processes] == ["buy_materiel", "build_product"]
    assert goal == Goal("product", True)


def test_parse_lines_multiple_goals():
    with pytest.raises(ConfigError, match="multiple goals found"):
        parse_lines(CONFIG + ["optimize:(euro)"])


def test_parse_lines_missing_resources():
    with pytest.raises(ConfigError, match="no resources found"):
        parse_lines(CONFIG[3:])


def test_parse_lines_missing_processes():
    with pytest.raises(ConfigError, match="no processes found"):
        parse_lines(["euro:10", "optimize:(euro)"])


def test_parse_lines_missing_goal():
    with pytest.raises(ConfigError, match="no goal found"):
        parse_lines(CONFIG[:-1])


def test_parse_lines_invalid_line():
    with pytest.raises(ConfigError, match="invalid line"):
        parse_lines(CONFIG + ["garbage here"])


def test_process_after_goal_clears_goal():
    lines = ["euro:10", "optimize:(product)", "buy:(euro:8):(product:1):10"]
    _, _, goal = parse_lines(lines)
    assert goal == Goal()


def test_parse_file_crlf(tmp_path):
    path = tmp_path / "simple.txt"
    path.write_bytes("\r\n".join(CONFIG).encode() + b"\r\n")
    resources, processes, goal = parse_file(path)
    assert resources[0].name == "euro"
    assert processes[-1].time == 30
    assert goal.product == "product"


def test_parse_file_missing(tmp_path):
    with pytest.raises(OSError):
        parse_file(tmp_path / "absent.txt")