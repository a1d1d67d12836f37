from __future__ import annotations

from django.http import JsonResponse

from contact_relay.core.bootstrap import check_database_connection


def health(request):
    db = check_database_connection()
    components = {"db": db}

    all_ok = all(v.get("ok", False) for v in components.values())

    status = "ok" if all_ok else "down"
    http_status = 200 if all_ok else 503

    return JsonResponse(
        {"status": status, "components": components},
        status=http_status,
    )
