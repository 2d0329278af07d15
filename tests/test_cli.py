import main


def test_sql_command(capsys):
    assert main.main(["sql", "--dialect", "sqlite"]) == 0
    out = capsys.readouterr().out
    assert "CREATE TABLE drug_screenings" in out


def test_init_db_command(monkeypatch):
    calls = []
    monkeypatch.setattr(main, "init_db", lambda: calls.append("init"))
    assert main.main(["init-db"]) == 0
    assert calls == ["init"]
