# e2e/kainos_header/selectors/header_selectors.py

# ヘッダのスコープは #header ランドマークで統一する
HEADER_SELECTOR = "#header"

# ロゴ
LOGO_IMG_SELECTOR = "#header img[alt='logo']"
LOGO_LINK_NAME_PATTERN = r"logo"
LOGO_SRC_FRAGMENT = "/globalassets/images/5_logos/kainos_logo.png"
LOGO_HREF = "/"

# Cookie バナー
ACCEPT_COOKIES_BUTTON_NAME = "I Accept Cookies"

# ランドマーク
BANNER_LANDMARK_SELECTOR = "header, [role='banner']"
MAIN_NAV_SELECTOR = "nav[aria-label='Main navigation']"

# キーボード操作で focus できるべき要素 (role, name)
KEYBOARD_ACCESSIBLE_ELEMENTS = (
    ("link", "Digital Services"),
    ("link", "Workday"),
    ("link", "Industries"),
    ("button", "Search"),
)

# 右側の要素
SHARE_BUTTON_NAME = "Open Share icons modal window"
SEARCH_BUTTON_NAME = "Search"
CONTACT_LINK_NAME = "Get in touch"
CONTACT_HREF = "/contact-us"

DROPDOWN_NAV_ITEM = "Digital Services"
