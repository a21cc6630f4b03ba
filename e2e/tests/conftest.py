import logging
from datetime import datetime

import pytest
import pytest_html
from dotenv import load_dotenv
from playwright.sync_api import sync_playwright

from kainos_header.core.artifacts import get_artifacts, png_base64
from kainos_header.core.browser import close_quietly, close_scenario_page, launch_browser, open_scenario_page
from kainos_header.core.settings import env_true, load_settings

logger = logging.getLogger(__name__)

PAGE_KEY = pytest.StashKey()
ARTIFACTS_KEY = pytest.StashKey()


def pytest_addoption(parser):
    parser.addoption(
        "--e2e",
        action="store_true",
        default=False,
        help="run tests marked e2e against the live site",
    )


def pytest_configure(config):
    load_dotenv()


def pytest_collection_modifyitems(config, items):
    if config.getoption("--e2e") or env_true("RUN_E2E"):
        return
    skip = pytest.mark.skip(reason="live site test: pass --e2e or set RUN_E2E=1")
    for item in items:
        if item.get_closest_marker("e2e") is not None:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def settings():
    return load_settings()


@pytest.fixture(scope="session")
def pw():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(pw, settings):
    b = launch_browser(pw, settings)
    yield b
    close_quietly(b, "browser")


@pytest.fixture(scope="session")
def artifacts(settings):
    return get_artifacts(settings.screenshot_dir, settings.artifact_dir)


@pytest.fixture()
def scenario_page(request, browser, settings, artifacts):
    """
    シナリオごとに context + page を作り、終わったら必ず閉じる
    """
    bundle = open_scenario_page(browser, settings)
    request.node.stash[PAGE_KEY] = bundle.page
    request.node.stash[ARTIFACTS_KEY] = artifacts

    trace_path = None
    if settings.trace:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        trace_path = artifacts.trace_path(_scenario_title(request.node), stamp)
        bundle.context.tracing.start(screenshots=True, snapshots=True, sources=True)

    yield bundle

    if trace_path is not None:
        try:
            bundle.context.tracing.stop(path=str(trace_path))
        except Exception as e:
            logger.warning("Failed to save trace %s: %s", trace_path, e)
    close_scenario_page(bundle)


@pytest.fixture()
def page(scenario_page):
    return scenario_page.page


def _scenario_title(item) -> str:
    sc = getattr(getattr(item, "obj", None), "__scenario__", None)
    return getattr(sc, "name", None) or item.name


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when != "call" or not report.failed:
        return

    page = item.stash.get(PAGE_KEY, None)
    artifacts = item.stash.get(ARTIFACTS_KEY, None)
    if page is None or artifacts is None:
        return
    shot = artifacts.capture_failure(page, _scenario_title(item))
    if shot is None:
        return

    if item.config.pluginmanager.getplugin("html") is None:
        return
    extras = getattr(report, "extras", [])
    extras.append(pytest_html.extras.png(png_base64(shot), name=shot.name))
    report.extras = extras


@pytest.hookimpl(optionalhook=True)
def pytest_bdd_step_error(request, feature, scenario, step, step_func, step_func_args, exception):
    logger.error("Step failed in %r: %s %s (%s)", scenario.name, step.keyword, step.name, exception)


@pytest.hookimpl(optionalhook=True)
def pytest_metadata(metadata):
    s = load_settings()
    metadata.update(s.site.report.metadata)
    metadata["Browser"] = "Chromium"
    metadata["Base URL"] = s.base_url
    metadata["Executed"] = datetime.now().strftime("%Y-%m-%d %H:%M:%S")


@pytest.hookimpl(optionalhook=True)
def pytest_html_report_title(report):
    report.title = load_settings().site.report.title
