from __future__ import annotations

from unittest.mock import Mock, patch

from csv_sms.services.progress import SendProgressTracker, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    with patch("sys.stdout.isatty", return_value=True):
        assert is_tty_enabled() is True
    with patch("sys.stdout.isatty", return_value=False):
        assert is_tty_enabled() is False


class TestSendProgressTracker:
    def test_init_with_tty_enabled(self):
        with patch("csv_sms.services.progress.is_tty_enabled", return_value=True), \
             patch("csv_sms.services.progress.tqdm") as mock_tqdm:
            tracker = SendProgressTracker(5)

            assert tracker.enabled is True
            mock_tqdm.assert_called_once_with(
                total=5,
                desc="Sending SMS",
                unit="msg",
                disable=False,
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )

    def test_init_with_tty_disabled(self):
        with patch("csv_sms.services.progress.is_tty_enabled", return_value=False):
            tracker = SendProgressTracker(5)
            assert tracker.enabled is False
            assert tracker.pbar is None

    def test_record_updates_bar_and_counts(self):
        mock_pbar = Mock()
        with patch("csv_sms.services.progress.is_tty_enabled", return_value=True), \
             patch("csv_sms.services.progress.tqdm", return_value=mock_pbar):
            tracker = SendProgressTracker(2)
            tracker.record(True)
            tracker.record(False)

        assert tracker.sent == 1
        assert tracker.failed == 1
        assert mock_pbar.update.call_count == 2
        mock_pbar.set_postfix.assert_called_with(sent=1, failed=1)

    def test_record_without_tty_only_counts(self):
        with patch("csv_sms.services.progress.is_tty_enabled", return_value=False):
            tracker = SendProgressTracker(1)
            tracker.record(True)
        assert tracker.sent == 1

    def test_context_manager_closes_bar(self):
        mock_pbar = Mock()
        with patch("csv_sms.services.progress.is_tty_enabled", return_value=True), \
             patch("csv_sms.services.progress.tqdm", return_value=mock_pbar):
            with SendProgressTracker(1) as tracker:
                pass
        mock_pbar.close.assert_called_once()
        assert tracker.pbar is None
