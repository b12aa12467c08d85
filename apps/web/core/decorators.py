"""
Decorators for request handling and validation.
"""

from collections.abc import Callable
from functools import wraps
from typing import Any

from django.http import HttpRequest, JsonResponse


def json_login_required(view_func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator for JSON endpoints that require an authenticated user.

    Unlike django's login_required it never redirects: anonymous callers
    get a 401 with the standard error body.

    Usage:
        @json_login_required
        def reservation_list(request):
            ...
    """

    @wraps(view_func)
    def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> Any:
        if not request.user.is_authenticated:
            return JsonResponse({"error": "Unauthorized"}, status=401)
        return view_func(request, *args, **kwargs)

    return wrapper
