import json
import logging

from adcard_extractor.logging import jlog, logging_context, set_global_context


def _payloads(caplog):
    return [json.loads(r.getMessage()) for r in caplog.records if r.name == "adcard_extractor"]


def test_jlog_merges_context_fields(caplog):
    caplog.set_level(logging.INFO, logger="adcard_extractor")
    set_global_context(app="adcard_extractor")
    with logging_context(card="c1"):
        jlog("info", event="inside")
    jlog("info", event="outside")

    inside, outside = _payloads(caplog)
    assert inside["event"] == "inside"
    assert inside["card"] == "c1"
    assert inside["app"] == "adcard_extractor"
    assert "card" not in outside
    assert "ts" in outside


def test_jlog_skips_disabled_levels(caplog):
    caplog.set_level(logging.INFO, logger="adcard_extractor")
    jlog("debug", event="hidden")
    assert _payloads(caplog) == []
