from __future__ import annotations
import json
from agents.catalog import time_periods

def _ok(body, code=200):
    return {"statusCode": code, "headers": {"Content-Type": "application/json"},
            "body": json.dumps(body, ensure_ascii=False)}

def handler(event, _ctx):
    return _ok(time_periods())
