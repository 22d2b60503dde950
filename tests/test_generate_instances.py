import json
import sys

from scripts.generate_instances import generate_random_lp, main


def run_main(monkeypatch, capsys, *args):
    monkeypatch.setattr(sys, "argv", ["generate_instances.py", *args])
    main()
    return json.loads(capsys.readouterr().out)


def test_seeded_instances_are_reproducible(monkeypatch, capsys):
    first = run_main(monkeypatch, capsys, "--seed", "7", "--count", "2")
    second = run_main(monkeypatch, capsys, "--seed", "7", "--count", "2")

    assert first == second
    assert first[0] != first[1]
    assert first[0] == generate_random_lp(3, 3, 7).model_dump()


def test_unseeded_instances_are_not_pinned_to_seed_zero(monkeypatch, capsys):
    payload = run_main(monkeypatch, capsys, "--count", "2")

    assert payload[0] != generate_random_lp(3, 3, 0).model_dump()
    assert payload[1] != generate_random_lp(3, 3, 1).model_dump()
    assert all(problem["relations"] == ["<=", "<=", "<="] for problem in payload)
