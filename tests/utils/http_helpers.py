from typing import Dict


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def error_code(response) -> str:
    return response.json()["error"]["code"]


def error_fields(response) -> Dict[str, str]:
    return {f["field"]: f["message"] for f in response.json()["error"].get("fields", [])}
