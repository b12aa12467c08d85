"""
Account views - session login and logout.
"""

from django.contrib.auth import authenticate, login, logout
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_GET, require_http_methods


@require_http_methods(["GET", "POST"])
def login_view(request: HttpRequest) -> HttpResponse:
    """
    GET/POST /accounts/login/

    Login page with username/password form.
    """
    if request.user.is_authenticated:
        return redirect("bookings:list")

    error = None

    if request.method == "POST":
        username = request.POST.get("username", "").strip()
        password = request.POST.get("password", "")

        user = authenticate(request, username=username, password=password)
        if user is not None:
            login(request, user)
            next_url = request.GET.get("next")
            if next_url and url_has_allowed_host_and_scheme(
                next_url,
                allowed_hosts={request.get_host()},
                require_https=request.is_secure(),
            ):
                return redirect(next_url)
            return redirect("bookings:list")

        error = "Invalid username or password"

    return render(request, "accounts/login.html", {"error": error})


@require_GET
def logout_view(request: HttpRequest) -> HttpResponse:
    """
    GET /accounts/logout/

    Logout and go back to the restaurant listing.
    """
    logout(request)
    return redirect("restaurant:home")
