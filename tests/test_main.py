import pytest

from huffcoder.main import main


def test_encode_then_decode(tmp_path, capsys):
    source = tmp_path / "msg.txt"
    packed = tmp_path / "msg.huf"
    restored = tmp_path / "msg.out"
    source.write_bytes(b"she sells sea shells by the sea shore" * 20)

    assert main(["encode", str(source), str(packed)]) == 0
    assert "Size reduced by" in capsys.readouterr().out

    assert main(["DECODE", str(packed), str(restored)]) == 0
    assert restored.read_bytes() == source.read_bytes()


def test_verbose_flag(tmp_path, capsys):
    source = tmp_path / "msg.txt"
    source.write_bytes(b"abracadabra")

    assert main(["encode", "-v", str(source), str(tmp_path / "msg.huf")]) == 0
    assert "9 nodes" in capsys.readouterr().out


def test_missing_input(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main(["encode", str(missing), str(tmp_path / "out")]) == 1
    assert str(missing) in capsys.readouterr().err


def test_invalid_compressed_file(tmp_path, capsys):
    packed = tmp_path / "bad.huf"
    packed.write_bytes(b"garbage")

    assert main(["decode", str(packed), str(tmp_path / "out")]) == 1
    assert "invalid compressed file" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()


def test_unknown_action(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["squash", str(tmp_path / "a"), str(tmp_path / "b")])
    assert excinfo.value.code == 2
