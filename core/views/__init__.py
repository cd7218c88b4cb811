from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET

from core.health import run_checks


@require_GET
def health(request: HttpRequest) -> JsonResponse:
    """
    Liveness endpoint for load balancers and container orchestrators.

    Answers 200 when the database and cache both respond, 503 otherwise.
    """
    results = run_checks()
    healthy = all(error is None for error in results.values())
    body = {"status": "ok" if healthy else "unavailable"}
    body.update(
        {name: "ok" if error is None else "failed" for name, error in results.items()}
    )
    return JsonResponse(body, status=200 if healthy else 503)
