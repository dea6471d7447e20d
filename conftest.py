import json
import logging
import re
import time
from datetime import datetime
from pathlib import Path
import pytest
from playwright.sync_api import sync_playwright
from wrappers.page_feature import FEATURE_CLASSES


ROOT_DIR = Path(__file__).parent
REPORT_DIR = Path.cwd() / "reports"
REPORT_FILE = REPORT_DIR / "report.html"


# ---------------------------------------------------------------------------
# Load configuration
# ---------------------------------------------------------------------------
with open(ROOT_DIR / "config.json", encoding="utf-8") as f:
    CONFIG = json.load(f)


# ---------------------------------------------------------------------------
# CLI options
# ---------------------------------------------------------------------------
def pytest_addoption(parser):
    parser.addoption(
        "--site_base_url",
        action="store",
        help="Override base_url from config.json",
    )

    parser.addoption(
        "--browser_name",
        action="store",
        choices=["chromium", "firefox", "webkit"],
        help="Override browser from config.json",
    )

    parser.addoption(
        "--headless",
        action="store",
        choices=["true", "false"],
        help="Override headless from config.json",
    )

    parser.addoption(
        "--screenshot_on_error",
        action="store",
        default="true",
        help="Capture screenshot on e2e test failure",
    )

    parser.addoption(
        "--pw_timeout",
        action="store",
        type=int,
        help="Default Playwright timeout (in ms)",
    )


# ---------------------------------------------------------------------------
# Config fixture
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def config(pytestconfig):
    cfg = CONFIG.copy()

    base_url = pytestconfig.getoption("site_base_url")
    if base_url:
        cfg["base_url"] = base_url

    browser = pytestconfig.getoption("browser_name")
    if browser:
        cfg["browser"] = browser

    headless = pytestconfig.getoption("headless")
    if headless is not None:
        cfg["headless"] = headless.lower() == "true"
    else:
        cfg["headless"] = bool(cfg.get("headless", True))

    timeout = pytestconfig.getoption("pw_timeout")
    if timeout is not None:
        cfg["timeout"] = timeout

    return cfg


# ---------------------------------------------------------------------------
# Keep page feature registrations made by tests from leaking
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def restore_feature_classes():
    saved = dict(FEATURE_CLASSES)
    yield
    FEATURE_CLASSES.clear()
    FEATURE_CLASSES.update(saved)


# ---------------------------------------------------------------------------
# Playwright fixtures
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def playwright_instance():
    """Provide a shared Playwright instance."""
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance, config):
    """Launch a browser based on config."""
    browser_name = config.get("browser", "chromium")
    headless = config.get("headless", True)
    browser = getattr(playwright_instance, browser_name).launch(headless=headless)
    yield browser
    browser.close()


@pytest.fixture(scope="function")
def context(browser, config):
    """New browser context per test."""
    context = browser.new_context()
    context.set_default_timeout(config.get("timeout", 30000))
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context, config):
    """New page per test."""
    page = context.new_page()
    page.set_default_timeout(config.get("timeout", 30000))
    yield page
    page.close()


def pytest_configure(config):
    """Make sure reports/ exists and direct pytest-html there."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    config.option.htmlpath = str(REPORT_FILE)
    logging.getLogger("wrappers").setLevel(logging.DEBUG)
    logging.getLogger("helpers").setLevel(logging.DEBUG)


def pytest_sessionstart(session):
    """Delete old report & screenshots before the session begins."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    for f in REPORT_DIR.glob("*"):
        try:
            f.unlink()
        except OSError as e:
            print(f"[WARN] Could not remove {f}: {e}")


def safe_filename(name: str) -> str:
    """
    Convert any string (like test names or parameterized values)
    into a filesystem-safe filename.
    Keeps letters, digits, underscore, dash, and dot only.
    """
    # Replace all invalid filename chars with '_'
    name = re.sub(r'[<>:"/\\|?*\s,=#@!%^&;{}()+\[\]]+', '_', name)
    # Collapse consecutive underscores
    name = re.sub(r'_+', '_', name)
    # Trim leading/trailing underscores or dots
    name = name.strip('._')
    return name[:150]  # limit length to avoid OS path length issues


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture a Playwright screenshot of a failed e2e test and attach it to the HTML report."""
    outcome = yield
    rep = outcome.get_result()

    # Run only when the test itself failed
    if rep.when != "call" or not rep.failed:
        return

    opt_value = item.config.getoption("screenshot_on_error") or "true"
    if str(opt_value).strip().lower() != "true":
        return

    from playwright.sync_api import Page

    page = item.funcargs.get("page", None)
    if not page or not isinstance(page, Page):
        return

    try:
        # Build unique name: {test-name}-yyyy-MM-dd-hh-mm-ss-sss.png
        ts = datetime.now().strftime("%Y-%m-%d-%H-%M-%S-%f")[:-3]
        screenshot_path = REPORT_DIR / f"{safe_filename(item.name)}-{ts}.png"

        # Give browser time to render any failure overlay
        time.sleep(0.2)
        page.screenshot(path=str(screenshot_path), full_page=True)
        print(f"[INFO] Screenshot saved → {screenshot_path}")

        html = item.config.pluginmanager.getplugin("html")
        if html:
            rel_path = screenshot_path.name
            rep.extras = getattr(rep, "extras", [])
            rep.extras.append(html.extras.html(
                f'<a href="{rel_path}" target="_blank">Open Screenshot</a>'))
            rep.extras.append(html.extras.image(rel_path))

    except Exception as e:
        print(f"[WARN] Screenshot capture failed: {e}")
