import pytest

from huffman import InvalidInput


def test_parse_symbol_pair(m):
    assert m._parse_symbol_pair("a=12") == ("a", 12)
    assert m._parse_symbol_pair("==3") == ("=", 3)
    assert m._parse_symbol_pair(" =0") == (" ", 0)


@pytest.mark.parametrize("pair", ["a12", "=12", "a=", "a=x"])
def test_parse_symbol_pair_rejects_malformed(m, pair):
    with pytest.raises(InvalidInput):
        _ = m._parse_symbol_pair(pair)


def test_build_code_from_pairs(m):
    code = m._build_code(["a=1", "b=2"])
    assert code.total_frequency == 3
    assert code.encode("b") == [True]


def test_cli_parser_accepts_subcommands(m):
    parser = m.get_parser()
    ns = parser.parse_args(["encode", "dad", "-s", "a=1", "-s", "d=2"])
    assert ns.cmd in ("encode", "e")
    assert ns.symbols == ["a=1", "d=2"]
    assert ns.style == "binary"
    ns2 = parser.parse_args(["d", "101", "-s", "a=1", "-s", "d=2"])
    assert ns2.cmd in ("decode", "d")
    ns3 = parser.parse_args(["table", "--style", "tf", "-s", "a=1"])
    assert ns3.cmd in ("table", "t") and ns3.style == "tf"


def test_cli_parser_requires_symbols(m):
    with pytest.raises(SystemExit):
        m.get_parser().parse_args(["encode", "dad"])
