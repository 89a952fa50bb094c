import base64
import json
import re

from lambdas.health.index import handler as health_handler
from lambdas.images.index import handle as images_handle
from lambdas.time_periods.index import handler as periods_handler
from lambdas.time_travel.index import handle as time_travel_handle

from conftest import GENERATED_BYTES, PNG_B64, FakeEditor, MemoryStore


def _travel(body, store=None, api_key="sk-test", **event):
    return time_travel_handle(
        {"body": body, **event},
        api_key=api_key,
        store=store,
        make_editor=lambda key: FakeEditor(),
    )


def test_health_and_periods():
    assert json.loads(health_handler({}, None)["body"])["status"] == "ok"
    res = periods_handler({}, None)
    assert res["statusCode"] == 200
    assert len(json.loads(res["body"])) == 8


def test_time_travel_then_fetch():
    store = MemoryStore()
    res = _travel(json.dumps({"timeperiod": "medieval", "imageData": PNG_B64}), store=store)
    assert res["statusCode"] == 200
    body = json.loads(res["body"])
    assert re.fullmatch(r"timetravel-medieval-\d+\.png", body["filename"])

    img = images_handle({"pathParameters": {"filename": body["filename"]}}, store=store)
    assert img["statusCode"] == 200
    assert img["isBase64Encoded"] is True
    assert base64.b64decode(img["body"]) == GENERATED_BYTES
    assert img["headers"]["Cache-Control"] == "public, max-age=31536000"


def test_time_travel_accepts_base64_encoded_event():
    raw = json.dumps({"timeperiod": "renaissance", "imageData": PNG_B64}).encode()
    res = _travel(base64.b64encode(raw).decode(), isBase64Encoded=True)
    assert res["statusCode"] == 200
    assert json.loads(res["body"])["stored"] is False


def test_time_travel_errors():
    assert _travel(json.dumps({"timeperiod": "atlantis", "imageData": PNG_B64}))["statusCode"] == 400
    assert _travel("not json")["statusCode"] == 400
    assert _travel("[]")["statusCode"] == 400
    no_key = _travel("not json", api_key="")
    assert no_key["statusCode"] == 500
    assert json.loads(no_key["body"])["error"] == "OpenAI API key not configured"
    assert json.loads(_travel(json.dumps({"timeperiod": 5, "imageData": PNG_B64}))["body"])["error"] == "Invalid request parameters"
    res = _travel(json.dumps({"timeperiod": "medieval", "imageData": PNG_B64}), api_key=None)
    assert res["statusCode"] == 500
    assert json.loads(res["body"])["error"] == "OpenAI API key not configured"


def test_unexpected_error_is_500():
    def boom(key):
        raise RuntimeError("unexpected")

    res = time_travel_handle(
        {"body": json.dumps({"timeperiod": "medieval", "imageData": PNG_B64})},
        api_key="sk-test", store=None, make_editor=boom,
    )
    assert res["statusCode"] == 500
    assert json.loads(res["body"]) == {"error": "Failed to process request"}


def test_images_list_and_missing():
    store = MemoryStore()
    store.put("a.png", b"1", "image/png")
    listing = json.loads(images_handle({"pathParameters": None}, store=store)["body"])
    assert listing["count"] == len(listing["images"]) == 1

    missing = images_handle({"pathParameters": {"filename": "zzz.png"}}, store=store)
    assert missing["statusCode"] == 404
    assert images_handle({}, store=None)["statusCode"] == 500
