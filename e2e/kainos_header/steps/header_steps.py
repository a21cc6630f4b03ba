"""Step definitions for the header feature.

Each phrase maps onto one routine in ``kainos_header.flows.header_flow``.
Import this module with ``*`` from the test module that calls ``scenarios()``
so pytest-bdd can see the step fixtures.
"""

from __future__ import annotations

from pytest_bdd import given, parsers, then, when

from kainos_header.core.text import column, table_rows
from kainos_header.core.types import NavItem
from kainos_header.flows import header_flow as F


# Background
@given("I navigate to the Kainos homepage")
def navigate_to_homepage(page, settings):
    F.open_homepage(page, settings.base_url)


@given("I accept the cookie consent")
def accept_cookie_consent(page):
    F.accept_cookies(page)


# Logo
@then("the Kainos logo should be visible")
def logo_visible(page):
    F.assert_logo_visible(page)


@then("the logo should contain the correct image source")
def logo_source(page):
    F.assert_logo_source(page)


@then("the logo should link to the homepage")
def logo_links_home(page):
    F.assert_logo_links_home(page)


# Navigation menu
@then("the following navigation items should be visible:")
def navigation_items_visible(page, datatable):
    rows = table_rows(datatable)
    items = [NavItem(label=label, url=url) for label, url in zip(column(rows, "Navigation Item"), column(rows, "URL"))]
    F.assert_nav_items(page, items)


# Right-side elements
@then(parsers.parse('the "{name}" button should be visible'))
def button_visible(page, name):
    F.assert_button_visible(page, name)


@then(parsers.parse('the "{name}" link should be visible'))
def link_visible(page, name):
    F.assert_link_visible(page, name)


@then(parsers.parse('the "{name}" link should point to "{url}"'))
def link_points_to(page, name, url):
    F.assert_link_points_to(page, name, url)


# Dropdown
@when(parsers.parse('I hover over the "{item}" navigation item'))
def hover_navigation_item(page, item):
    F.hover_nav_item(page, item)


@then("the following services should be visible in the dropdown:")
def services_visible(page, datatable):
    F.assert_dropdown_links(page, column(table_rows(datatable), "Service"))


@then("the following impacts should be visible in the dropdown:")
def impacts_visible(page, datatable):
    F.assert_dropdown_links(page, column(table_rows(datatable), "Impact"))


# Navigation
@when(parsers.parse('I click on the "{item}" navigation item'))
def click_navigation_item(page, item):
    F.click_header_link(page, item)


@when(parsers.parse('I click on the "{text}" link'))
def click_link(page, text):
    F.click_header_link(page, text)


@then(parsers.parse('I should be navigated to "{url}"'))
def navigated_to(page, url):
    F.assert_url_contains(page, url)


@then(parsers.parse('the page title should contain "{text}"'))
def title_contains(page, text):
    F.assert_title_contains(page, text)


# Accessibility
@then("all navigation links should be keyboard accessible")
def keyboard_accessible(page):
    F.assert_keyboard_accessible(page)


@then("the header should have proper ARIA landmarks")
def aria_landmarks(page):
    F.assert_banner_landmark(page)


@then("the main navigation landmark should be visible")
def main_nav_landmark(page):
    F.assert_main_nav_landmark(page)
