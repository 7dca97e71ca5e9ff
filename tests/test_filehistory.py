from termcli.filehistory import FileHistoryStorage


def test_missing_file_has_no_commands(tmp_path):
    storage = FileHistoryStorage(tmp_path / "absent.txt")
    assert storage.commands() == []


def test_store_round_trip(tmp_path):
    storage = FileHistoryStorage(tmp_path / "history.txt")
    storage.store(["hello", "answer 42", "sub"])
    assert storage.commands() == ["hello", "answer 42", "sub"]


def test_store_appends(tmp_path):
    path = tmp_path / "history.txt"
    FileHistoryStorage(path).store(["one"])
    FileHistoryStorage(path).store(["two", "three"])
    assert FileHistoryStorage(path).commands() == ["one", "two", "three"]


def test_file_format_is_one_line_per_command(tmp_path):
    path = tmp_path / "history.txt"
    FileHistoryStorage(path).store(["a", "b"])
    assert path.read_text() == "a\nb\n"


def test_oldest_commands_are_dropped(tmp_path):
    storage = FileHistoryStorage(tmp_path / "history.txt", max_size=3)
    storage.store(["c1", "c2"])
    storage.store(["c3", "c4", "c5"])
    assert storage.commands() == ["c3", "c4", "c5"]


def test_size_never_exceeds_limit(tmp_path):
    storage = FileHistoryStorage(tmp_path / "history.txt", max_size=5)
    for i in range(4):
        storage.store([f"cmd{i}-{j}" for j in range(3)])
        assert len(storage.commands()) <= 5
    assert storage.commands()[-1] == "cmd3-2"


def test_last_line_without_newline_is_read(tmp_path):
    path = tmp_path / "history.txt"
    path.write_text("first\nsecond")
    assert FileHistoryStorage(path).commands() == ["first", "second"]


def test_clear(tmp_path):
    path = tmp_path / "history.txt"
    storage = FileHistoryStorage(path)
    storage.store(["x", "y"])
    storage.clear()
    assert storage.commands() == []
    assert path.exists()