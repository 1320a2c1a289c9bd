import builtins
import csv
import json
import random
from pathlib import Path

from apps.cli import play, survey
from apps.cli.play import PlayContext, handle_line, remaining_words
from apps.cli.survey import choose_roots, survey_root
from packages.engine import WordSetOracle
from packages.session import Session, write_csv, write_manifest

VOCAB = ["silk", "worm", "milk", "owl", "worms", "silks", "ball", "base"]


def _ctx():
    return PlayContext(words=["baseball"], oracle=WordSetOracle(VOCAB),
                       vocabulary=VOCAB, rng=random.Random(0))


def _no_input(prompt=""):
    raise EOFError


def _dictionary(tmp_path: Path) -> str:
    p = tmp_path / "dict.txt"
    p.write_text("\n".join(VOCAB) + "\n", encoding="utf-8")
    return str(p)


def test_play_accepts_and_rejects():
    ctx = _ctx()
    s = Session(root="silkworm")

    s, out, go = handle_line("Silk", s, ctx)
    assert go and out == ["+ (4) silk"] and s.used == ("silk",)

    s, out, go = handle_line("silk", s, ctx)
    assert out == ["Word used already: Be more original"]

    s, out, go = handle_line("silks", s, ctx)
    assert out == ["Word not possible: You can't spell that word from 'silkworm'!"]

    s, out, go = handle_line("worms", s, ctx)
    assert out == ["+ (5) worms"] and s.used == ("worms", "silk")

    s, out, go = handle_line("   ", s, ctx)
    assert out == [] and s.used == ("worms", "silk")


def test_play_commands():
    ctx = _ctx()
    s = Session(root="silkworm", used=("silk",))

    _, out, _ = handle_line(":words", s, ctx)
    assert out == ["  (4) silk"]

    _, out, _ = handle_line(":hint", s, ctx)
    assert out == ["4 word(s) left to find."]
    assert remaining_words(s, ctx) == ["worm", "milk", "owl", "worms"]

    s2, out, go = handle_line(":new", s, ctx)
    assert go and s2.root == "baseball" and s2.used == ()
    assert "BASEBALL" in out[0]

    _, out, _ = handle_line(":bogus", s, ctx)
    assert "Unknown command" in out[0]

    _, out, go = handle_line(":quit", s, ctx)
    assert go is False and "1 word(s)" in out[0]


def test_play_main_missing_list_falls_back(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.setattr(builtins, "input", _no_input)
    rc = play.main(["--words", str(tmp_path / "missing.txt"), "--dictionary", _dictionary(tmp_path)])
    out = capsys.readouterr().out
    assert rc == 0
    assert "FAIL" in out
    assert "Root word: SILKWORM" in out


def test_play_main_undecodable_list_falls_back(tmp_path: Path, monkeypatch, capsys):
    words = tmp_path / "start.txt"
    words.write_bytes(b"silkworm\n\xff\xfebad\n")
    monkeypatch.setattr(builtins, "input", _no_input)
    rc = play.main(["--words", str(words), "--dictionary", _dictionary(tmp_path)])
    out = capsys.readouterr().out
    assert rc == 0
    assert "unreadable" in out
    assert "Root word: SILKWORM" in out


def test_play_main_strict_exits_2(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.setattr(builtins, "input", _no_input)
    rc = play.main(["--words", str(tmp_path / "missing.txt"), "--dictionary", _dictionary(tmp_path),
                    "--strict"])
    assert rc == 2
    assert "error:" in capsys.readouterr().err


def test_survey_main_bad_lists_exit_2(tmp_path: Path, capsys):
    undecodable = tmp_path / "start.txt"
    undecodable.write_bytes(b"silkworm\n\xff\xfebad\n")
    for path in (tmp_path / "missing.txt", undecodable):
        rc = survey.main(["--words", str(path), "--outdir", str(tmp_path / "reports")])
        assert rc == 2
        assert "error:" in capsys.readouterr().err
    assert not (tmp_path / "reports").exists()


def test_survey_main_writes_reports(tmp_path: Path):
    words = tmp_path / "start.txt"
    words.write_text("silkworm\nbaseball\n", encoding="utf-8")
    outdir = tmp_path / "reports"
    rc = survey.main(["--words", str(words), "--vocab-size", "2000", "--outdir", str(outdir)])
    assert rc == 0
    assert len(list(outdir.glob("survey_*.csv"))) == 1
    manifests = list(outdir.glob("survey_*_manifest.json"))
    assert len(manifests) == 1
    assert json.loads(manifests[0].read_text(encoding="utf-8"))["num_roots"] == 2


def test_survey_root_and_writers(tmp_path: Path):
    oracle = WordSetOracle(["silk", "worm"])
    r = survey_root("silkworm", VOCAB, oracle)
    assert r["derivable"] == ["silk", "worm", "milk", "owl", "worms"]
    assert r["real"] == ["silk", "worm"]

    csv_path = write_csv([r], str(tmp_path / "out" / "survey.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows == [{
        "root": "silkworm", "length": "8", "derivable": "5", "real": "2",
        "longest": "silk", "sample": "silk worm",
    }]

    m_path = write_manifest({"num_roots": 1}, str(tmp_path / "m.json"))
    assert json.loads(Path(m_path).read_text(encoding="utf-8")) == {"num_roots": 1}


def test_choose_roots_sample_is_deterministic():
    words = ["a" * 8, "b" * 8, "c" * 8, "d" * 8]
    assert choose_roots(words, None, 1) == words
    s1 = choose_roots(words, 2, 42)
    assert s1 == choose_roots(words, 2, 42) and len(s1) == 2


def test_select_roots_filters_and_dedupes():
    from script.build_start_words import select_roots
    words = ["Silkworm", "baseball", "silkworm", "café-bar", "kangaroo", "short", "ümbrella"]
    assert select_roots(words, 8) == ["silkworm", "baseball", "kangaroo"]
    assert select_roots(words, 8, limit=2) == ["silkworm", "baseball"]
