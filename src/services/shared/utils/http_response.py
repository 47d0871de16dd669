import json
from typing import Any


def api_response(status_code: int, body: dict | list) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str, ensure_ascii=False),
    }


def success_response(data: Any, status_code: int = 200) -> dict:
    return api_response(status_code, {"status": "success", "data": data})


def error_response(status_code: int, error: str, message: str, **fields: Any) -> dict:
    """エラーレスポンス（fields は None 以外のみ body に含める）"""
    body = {"status": "error", "error": error, "message": message}
    body.update({key: value for key, value in fields.items() if value is not None})
    return api_response(status_code, body)
