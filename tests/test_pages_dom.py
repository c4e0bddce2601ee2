"""
Page objects against a real browser.

A small DocSearch-like site is served through ``context.route`` so the
selectors, shortcuts, debounce race and appearance detection run against
real DOM without touching the network.
"""

import re

import pytest

from reactscout import (
    Appearance,
    Direction,
    InteractionConfig,
    InteractionTimeout,
    OverlayState,
    ResultsState,
    Session,
)

pytestmark = pytest.mark.browser

SITE = "https://reactscout.test"

FIXTURE_HTML = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>React</title>
  <style>
    .DocSearch-Modal { display: none; }
    .DocSearch-Modal.open { display: block; }
    .DocSearch-NoResults { display: none; }
    .DocSearch-NoResults.shown { display: block; }
    .DocSearch-Hit a { display: block; padding: 8px; }
    .DocSearch-Hit[aria-selected="true"] { background: #eee; }
    button.menu { display: none; }
    @media (max-width: 600px) { button.menu { display: block; } }
  </style>
</head>
<body>
  <nav role="navigation">
    <a href="/">React</a>
    <a href="/learn">Learn</a>
    <a href="/reference/react"> Reference </a>
    <a href="/community"></a>
    <button class="DocSearch-Button">Search</button>
    <button data-theme-toggle>&#9680;</button>
    <button class="menu" aria-label="Menu">&#9776;</button>
  </nav>
  <main><h1>__TITLE__</h1></main>
  <div class="DocSearch-Modal" role="dialog" aria-label="Search">
    <input class="DocSearch-Input" type="search">
    <ul class="DocSearch-Hits"></ul>
    <div class="DocSearch-NoResults">No results for this query</div>
  </div>
  <footer><a href="https://github.com/facebook/react">GitHub</a></footer>
  <script>
    window.__openKeys = "ctrl";
    const TITLES = ["useState", "useEffect", "useSyncExternalStore", "useRef"];
    const modal = document.querySelector(".DocSearch-Modal");
    const input = document.querySelector(".DocSearch-Input");
    const hits = document.querySelector(".DocSearch-Hits");
    const noResults = document.querySelector(".DocSearch-NoResults");
    let highlighted = -1;
    let timer = null;

    function openModal() { modal.classList.add("open"); input.focus(); }
    function closeModal() {
      modal.classList.remove("open");
      input.value = "";
      render();
    }
    function render() {
      const q = input.value.trim().toLowerCase();
      hits.innerHTML = "";
      highlighted = -1;
      noResults.classList.remove("shown");
      if (!q) return;
      const matched = TITLES.filter((t) => t.toLowerCase().includes(q));
      if (!matched.length) { noResults.classList.add("shown"); return; }
      for (const t of matched) {
        const li = document.createElement("li");
        li.className = "DocSearch-Hit";
        li.innerHTML = '<a href="/reference/' + t + '">' + t + "</a>";
        hits.appendChild(li);
      }
    }
    function highlight(step) {
      const items = hits.querySelectorAll(".DocSearch-Hit");
      if (!items.length) return;
      highlighted = Math.max(0, Math.min(items.length - 1, highlighted + step));
      items.forEach((el, i) => el.setAttribute("aria-selected", String(i === highlighted)));
    }

    input.addEventListener("input", () => {
      clearTimeout(timer);
      timer = setTimeout(render, 100);
    });
    document.querySelector(".DocSearch-Button").addEventListener("click", openModal);
    document.querySelector("[data-theme-toggle]").addEventListener("click", () => {
      document.documentElement.classList.toggle("dark");
    });
    document.addEventListener("keydown", (e) => {
      if (e.key.toLowerCase() === "k") {
        const ctrl = e.ctrlKey && ["ctrl", "both"].includes(window.__openKeys);
        const meta = e.metaKey && ["meta", "both"].includes(window.__openKeys);
        if (ctrl || meta) { e.preventDefault(); openModal(); }
      } else if (e.key === "Escape") {
        closeModal();
      } else if (modal.classList.contains("open") && e.key === "ArrowDown") {
        highlight(1);
      } else if (modal.classList.contains("open") && e.key === "ArrowUp") {
        highlight(-1);
      } else if (modal.classList.contains("open") && e.key === "Enter" && highlighted >= 0) {
        window.location.href = hits.querySelectorAll(".DocSearch-Hit a")[highlighted].href;
      }
    });
  </script>
</body>
</html>
"""


def serve_fixture(route):
    path = route.request.url[len(SITE):] or "/"
    if path == "/favicon.ico":
        route.fulfill(status=404, body="")
        return
    route.fulfill(
        status=200,
        content_type="text/html; charset=utf-8",
        body=FIXTURE_HTML.replace("__TITLE__", path),
    )


@pytest.fixture
def fixture_config():
    return InteractionConfig(
        base_url=SITE,
        navigation_timeout_ms=3000,
        probe_timeout_ms=500,
        quick_probe_timeout_ms=300,
        search_open_timeout_ms=1000,
        search_close_timeout_ms=1000,
        result_timeout_ms=2000,
        settle_delay_ms=50,
        debounce_delay_ms=150,
        search_settle_delay_ms=300,
        key_settle_delay_ms=50,
    )


@pytest.fixture
def site(playwright_browser, fixture_config):
    context = playwright_browser.new_context(viewport={"width": 1280, "height": 720})
    context.route(re.compile(r"^https://reactscout\.test/"), serve_fixture)
    page = context.new_page()
    session = Session.bind(page, context=context, config=fixture_config)
    session.home.navigate_home()
    yield session
    context.close()


def set_open_keys(session, keys):
    session.page.evaluate(f"window.__openKeys = {keys!r}")


class TestHomePageDom:
    def test_navigate_home(self, site):
        assert site.page.url == f"{SITE}/"
        assert site.home.is_visible(site.home.main_content)
        assert site.home.is_visible(site.home.footer)

    def test_navigation_labels(self, site):
        assert site.home.navigation_labels() == ["React", "Learn", "Reference"]

    def test_open_search_via_button(self, site):
        assert site.home.open_search() is True
        assert site.search.is_open()

    def test_search_for_and_click_first_result(self, site):
        site.home.open_search()
        site.home.search_for("effect")
        site.home.click_first_search_result()

        site.page.wait_for_url(f"{SITE}/reference/useEffect")

    def test_toggle_appearance(self, site):
        assert site.home.is_visible(site.home.theme_toggle)
        assert site.home.current_appearance() is Appearance.LIGHT

        assert site.home.toggle_appearance() == "[data-theme-toggle]"
        assert site.home.current_appearance() is Appearance.DARK

        site.home.toggle_appearance()
        assert site.home.current_appearance() is Appearance.LIGHT

    @pytest.mark.parametrize("scheme,expected", [
        ("dark", Appearance.DARK),
        ("light", Appearance.LIGHT),
    ])
    def test_system_color_scheme(self, site, scheme, expected):
        site.page.emulate_media(color_scheme=scheme)
        assert site.home.current_appearance() is expected

    def test_compact_menu_only_on_narrow_viewport(self, site):
        assert site.home.open_compact_menu() is False

        site.page.set_viewport_size({"width": 375, "height": 667})
        assert site.home.open_compact_menu() is True


class TestSearchOverlayDom:
    def test_open_via_primary_shortcut(self, site):
        site.search.open_via_keyboard()
        assert site.search.state is OverlayState.OPEN

    def test_open_via_secondary_shortcut(self, site):
        set_open_keys(site, "meta")
        site.search.open_via_keyboard()
        assert site.search.is_open()

    def test_open_fails_when_no_shortcut_works(self, site):
        set_open_keys(site, "none")
        with pytest.raises(InteractionTimeout):
            site.search.open_via_keyboard()
        assert site.search.state is OverlayState.CLOSED

    def test_open_via_click(self, site):
        site.search.open_via_click()
        assert site.search.state is OverlayState.OPEN

    def test_debounced_results(self, site):
        site.search.open_via_keyboard()

        assert site.search.search("useS") is ResultsState.HAS_RESULTS
        assert site.search.results() == ["useState", "useSyncExternalStore"]
        assert site.search.has_results()

    def test_no_results(self, site):
        site.search.open_via_keyboard()

        assert site.search.search("xyzabc123notfound") is ResultsState.NO_RESULTS
        assert site.search.has_no_results_message()
        assert site.search.results() == []

    def test_refining_a_query(self, site):
        site.search.open_via_keyboard()
        site.search.search("xyz")
        assert site.search.search("useRef") is ResultsState.HAS_RESULTS
        assert site.search.results() == ["useRef"]

    def test_select_result(self, site):
        site.search.open_via_keyboard()
        site.search.search("use")
        site.search.select_result(1)

        site.page.wait_for_url(f"{SITE}/reference/useEffect")
        assert site.search.state is OverlayState.CLOSED

    def test_keyboard_selection(self, site):
        site.search.open_via_keyboard()
        site.search.search("use")

        site.search.navigate_results(Direction.DOWN)
        site.search.navigate_results(Direction.DOWN)
        site.search.navigate_results(Direction.UP)
        site.search.select_highlighted_result()

        site.page.wait_for_url(f"{SITE}/reference/useState")

    def test_close_with_escape(self, site):
        site.search.open_via_keyboard()
        site.search.search("useState")

        site.search.close()

        assert site.search.state is OverlayState.CLOSED
        assert not site.search.is_open()

    def test_clear_search(self, site):
        site.search.open_via_keyboard()
        site.search.search("useState")

        site.search.clear_search()
        # Hits are re-rendered after the site's debounce
        site.search.search_results.first.wait_for(state="hidden", timeout=2000)

        assert site.search.search_input.input_value() == ""
        assert site.search.results() == []
