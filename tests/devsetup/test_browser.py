from common.step_result import StepStatus
from devsetup.config import BROWSER_PATHS_DEFAULT
from devsetup.steps.browser import check_browser, find_browser, iter_browser_paths


def test_iter_browser_paths_covers_every_platform():
    paths = list(iter_browser_paths(BROWSER_PATHS_DEFAULT))

    assert paths == [
        "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
        "C:\\Program Files\\Google\\Chrome\\Application\\chrome.exe",
        "C:\\Program Files (x86)\\Google\\Chrome\\Application\\chrome.exe",
        "/usr/bin/google-chrome",
        "/usr/bin/chromium-browser",
    ]


def test_find_browser_returns_first_existing(tmp_path):
    first = tmp_path / "chrome"
    second = tmp_path / "chromium"
    second.write_text("")
    first.write_text("")

    found = find_browser(
        {"linux": [str(tmp_path / "missing"), str(first)], "other": [str(second)]}
    )

    assert found == str(first)


def test_find_browser_none(tmp_path):
    assert find_browser({"linux": [str(tmp_path / "missing")]}) is None


def test_check_browser_found(app_settings, setup_context, tmp_path):
    chrome = tmp_path / "google-chrome"
    chrome.write_text("")
    app_settings.browser_paths = {"linux": [str(chrome)]}

    result = check_browser(app_settings, setup_context)

    assert result.status is StepStatus.SUCCESS
    assert result.message == "Chrome browser found"
    assert result.value == str(chrome)


def test_check_browser_missing_is_warning(
    app_settings, setup_context, tmp_path, mock_logger
):
    app_settings.browser_paths = {"linux": [str(tmp_path / "nope")]}

    result = check_browser(app_settings, setup_context, mock_logger)

    assert result.status is StepStatus.WARNING
    assert result.message == "Chrome browser not found in standard locations"
    assert result.details == [
        "Please ensure Chrome is installed for extension development"
    ]
    mock_logger.error.assert_not_called()


def test_check_browser_skipped(app_settings, setup_context, mocker):
    app_settings.skip_browser_check = True
    mock_find = mocker.patch("devsetup.steps.browser.find_browser")

    result = check_browser(app_settings, setup_context)

    assert result.status is StepStatus.SKIPPED
    mock_find.assert_not_called()
