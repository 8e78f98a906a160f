import pytest
from bitpacket.__main__ import format_packet, main
from bitpacket.decoder import decode


# -----------------------------------------------------------------------------

@pytest.fixture
def infile(tmp_path):
    path = tmp_path / 'input.txt'
    path.write_text('9C0141080250320F1802104A08\n')
    return path


def run(capsys, *argv) -> list[str]:
    main([str(a) for a in argv])
    return capsys.readouterr().out.splitlines()


# -----------------------------------------------------------------------------

def test_versions(capsys, tmp_path):
    path = tmp_path / 'input.txt'
    path.write_text('8A004A801A8002F478')
    assert run(capsys, 'versions', path) == ['16']


def test_evaluate(capsys, infile):
    assert run(capsys, 'evaluate', infile) == ['1']


def test_solve(capsys, tmp_path):
    path = tmp_path / 'input.txt'
    path.write_text('D2FE28')
    assert run(capsys, 'solve', path) == ['versions: 6', 'value: 2021']


def test_show(capsys, tmp_path):
    path = tmp_path / 'input.txt'
    path.write_text('38006F45291200')
    assert run(capsys, 'show', path) == [
        'LessThan v1 (bits)',
        '  Literal v6 10',
        '  Literal v2 20'
    ]


def test_reframe(capsys, tmp_path):
    path = tmp_path / 'input.txt'
    path.write_text('38006F45291200')

    [s] = run(capsys, 'reframe', path)
    assert decode(s).length_mode.name == 'Count'

    [s] = run(capsys, 'reframe', '-m', 'bits', path)
    assert s == '38006F45291200'


def test_timing(capsys, infile):
    out = run(capsys, 'evaluate', '-t', infile)
    assert out[0] == '1'
    assert out[1].startswith('Decoding completed in ')


def test_max_depth(infile):
    with pytest.raises(ValueError):
        main(['evaluate', '--max-depth', '1', str(infile)])


def test_format_packet_depth():
    lines = list(format_packet(decode('9C0141080250320F1802104A08')))
    assert lines[0] == 'EqualTo v4 (bits)'
    assert all(line.startswith('  ') for line in lines[1:])
