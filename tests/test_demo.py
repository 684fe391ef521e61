from fixedmap.demo import main


def test_main_returns_zero_and_prints_size(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert "Size: 2" in out.splitlines()


def test_main_prints_value(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Size: 2", "map[13]: 37"]


def test_main_reports_no_failures(capsys):
    main()
    out = capsys.readouterr().out
    assert "not yet working" not in out