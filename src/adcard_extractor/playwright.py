"""Playwright helpers for capturing a card snapshot from a live page."""

from __future__ import annotations

from playwright.async_api import Page, async_playwright

from .logging import jlog
from .snapshot import CardSnapshot, snapshot_card

DEFAULT_USER_AGENT = "adcard-extractor/1.0"
DEFAULT_PAGE_TIMEOUT_MS = 30_000

CHROMIUM_LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-setuid-sandbox",
    "--disable-gpu",
]


async def wait_assets_ready(page: Page) -> None:
    """Wait for fonts and images to settle so rendered sizes are final."""

    try:
        await page.evaluate(
            """
            () => Promise.all([
                (document.fonts && document.fonts.ready) ? document.fonts.ready : Promise.resolve(),
                Promise.all(
                    Array.from(document.images || []).map(img => {
                        if (img.complete) return Promise.resolve();
                        return new Promise(res => {
                            img.addEventListener('load', () => res(), { once: true });
                            img.addEventListener('error', () => res(), { once: true });
                        });
                    })
                )
            ])
            """
        )
    except Exception as exc:  # pragma: no cover - best effort only
        jlog("warning", event="assets_wait_failed", error=str(exc))


async def cleanup_playwright(context, browser) -> None:
    """Close the browser resources, ignoring teardown errors."""

    try:
        if context:
            await context.close()
    except Exception as exc:
        jlog("debug", event="context_close_failed", error=str(exc))
    try:
        if browser:
            await browser.close()
    except Exception as exc:
        jlog("debug", event="browser_close_failed", error=str(exc))


async def capture_card_from_url(
    url: str,
    selector: str,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
    page_timeout_ms: int = DEFAULT_PAGE_TIMEOUT_MS,
) -> CardSnapshot:
    """Open ``url`` and snapshot the first element matching ``selector``.

    Raises ``LookupError`` when the selector matches nothing; Playwright errors
    propagate after the browser is closed.
    """

    async with async_playwright() as pw:
        browser = None
        context = None
        try:
            browser = await pw.chromium.launch(args=CHROMIUM_LAUNCH_ARGS)
            context = await browser.new_context(user_agent=user_agent)
            context.set_default_timeout(page_timeout_ms)
            page = await context.new_page()
            await page.goto(url, wait_until="domcontentloaded", timeout=page_timeout_ms)
            handle = await page.wait_for_selector(selector, state="attached", timeout=page_timeout_ms)
            if handle is None:
                raise LookupError(f"selector matched nothing: {selector}")
            await wait_assets_ready(page)
            snapshot = await snapshot_card(handle, page_url=page.url)
            jlog("info", event="card_captured", url=page.url, media=len(snapshot.media), names=len(snapshot.brand_context.names))
            return snapshot
        finally:
            await cleanup_playwright(context, browser)


__all__ = [
    "CHROMIUM_LAUNCH_ARGS",
    "DEFAULT_PAGE_TIMEOUT_MS",
    "DEFAULT_USER_AGENT",
    "capture_card_from_url",
    "cleanup_playwright",
    "wait_assets_ready",
]
