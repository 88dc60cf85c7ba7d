"""Tests for SearchRunner."""

import io

from pkgprobe.runner.search import SearchRunner


def test_successful_search():
    """Combined output and exit status are captured."""
    out = io.StringIO()
    runner = SearchRunner(out=out)
    result = runner.run("apt", "echo 'openbangla-keyboard 2.0.0'", timeout=5)

    assert result.success is True
    assert result.exit_status == 0
    assert "openbangla-keyboard 2.0.0" in result.combined_output
    assert result.log_file is None


def test_output_echoed_on_success():
    """Raw output reaches the output stream even when the search passes."""
    out = io.StringIO()
    SearchRunner(out=out).run("apt", "echo found-it", timeout=5)

    assert out.getvalue() == "found-it\n"


def test_output_echoed_on_failure():
    """Raw output reaches the output stream when the search fails."""
    out = io.StringIO()
    result = SearchRunner(out=out).run(
        "zypper", "echo 'repository error'; exit 5", timeout=5
    )

    assert result.exit_status == 5
    assert "repository error" in out.getvalue()


def test_stderr_is_merged():
    """stderr lands in combined_output in write order."""
    out = io.StringIO()
    result = SearchRunner(out=out).run(
        "apt", "echo first; echo second >&2; echo third", timeout=5
    )

    assert result.combined_output.splitlines() == [
        "first", "second", "third",
    ]


def test_log_file_written(tmp_path):
    """Search output is saved to a timestamped file when requested."""
    output_dir = tmp_path / "nonexistent" / "logs"
    runner = SearchRunner(output_dir=output_dir, out=io.StringIO())
    result = runner.run("mycheck", "echo 'Test Output'", timeout=5)

    assert output_dir.exists()
    assert result.log_file.exists()
    assert "mycheck" in result.log_file.name
    assert "Test Output" in result.log_file.read_text()


def test_timeout_handling():
    """A search that exceeds its timeout fails with status -1."""
    result = SearchRunner(out=io.StringIO()).run("slow", "sleep 10", timeout=1)

    assert result.success is False
    assert result.exit_status == -1
    assert result.timed_out is True
