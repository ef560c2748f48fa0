"""Unit tests for FileLogStore ring buffer"""

from src.adapter.services.file_log_store import FileLogStore, MAX_LOG_LINES


class TestFileLogStore:
    def test_append_creates_file_and_parent_directory(self, tmp_path):
        store = FileLogStore(str(tmp_path / "logs" / ".runtime.logs"))

        store.append("first")

        assert (tmp_path / "logs" / ".runtime.logs").read_text() == "first\n"
        assert store.read_lines() == ["first"]

    def test_read_missing_file(self, tmp_path):
        assert FileLogStore(str(tmp_path / "missing.log")).read_lines() == []

    def test_keeps_only_last_lines(self, tmp_path):
        store = FileLogStore(str(tmp_path / "runtime.log"))

        for n in range(MAX_LOG_LINES + 25):
            store.append(f"line {n}")

        lines = store.read_lines()
        assert len(lines) == MAX_LOG_LINES
        assert lines[0] == "line 25"
        assert lines[-1] == f"line {MAX_LOG_LINES + 24}"

    def test_custom_capacity(self, tmp_path):
        store = FileLogStore(str(tmp_path / "runtime.log"), max_lines=3)

        for n in range(5):
            store.append(f"line {n}")

        assert store.read_lines() == ["line 2", "line 3", "line 4"]

    def test_blank_lines_are_dropped(self, tmp_path):
        path = tmp_path / "runtime.log"
        path.write_text("a\n\n   \nb\n")
        store = FileLogStore(str(path))

        store.append("c")

        assert path.read_text() == "a\nb\nc\n"

    def test_undecodable_bytes_do_not_block_appends(self, tmp_path):
        """
        Given: A log file holding bytes that are not valid UTF-8
        When: A new line is appended
        Then: The broken line is kept with replacement characters and the append succeeds
        """
        path = tmp_path / "runtime.log"
        path.write_bytes(b"\xff\xfe broken\n")
        store = FileLogStore(str(path))

        store.append("hello")

        lines = store.read_lines()
        assert lines[-1] == "hello"
        assert lines[0] == "\ufffd\ufffd broken"
