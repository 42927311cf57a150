from __future__ import annotations

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_http_methods, require_POST

from services.core.logging import get_logger

from .forms import ChirpForm
from .models import Chirp
from .policies import ChirpPolicy, authorize

logger = get_logger(__name__)


@login_required
@require_http_methods(["GET", "POST"])
def index(request: HttpRequest) -> HttpResponse:
    """List all Chirps, newest first; POST creates a Chirp for the current user."""
    if request.method == "POST":
        form = ChirpForm(request.POST)
        if form.is_valid():
            chirp = form.save(commit=False)
            chirp.user = request.user
            chirp.save()
            logger.info(f"User {request.user.pk}: created chirp {chirp.pk}")
            return redirect("chirps:index")
    else:
        form = ChirpForm()

    chirps = list(Chirp.objects.select_related("user"))
    for chirp in chirps:
        chirp.can_update = ChirpPolicy.update(request.user, chirp)
        chirp.can_delete = ChirpPolicy.delete(request.user, chirp)

    return render(request, "chirps/index.html", {"form": form, "chirps": chirps})


@login_required
@require_http_methods(["GET", "POST"])
def edit(request: HttpRequest, pk: int) -> HttpResponse:
    """Edit a Chirp; only its author may do so."""
    chirp = get_object_or_404(Chirp.objects.select_related("user"), pk=pk)
    authorize(request.user, "update", chirp)

    if request.method == "POST":
        form = ChirpForm(request.POST, instance=chirp)
        if form.is_valid():
            form.save()
            logger.info(f"User {request.user.pk}: updated chirp {chirp.pk}")
            messages.success(request, "Chirp updated.")
            return redirect("chirps:index")
    else:
        form = ChirpForm(instance=chirp)

    return render(request, "chirps/edit.html", {"form": form, "chirp": chirp})


@login_required
@require_POST
def destroy(request: HttpRequest, pk: int) -> HttpResponse:
    """Delete a Chirp; only its author may do so."""
    chirp = get_object_or_404(Chirp, pk=pk)
    authorize(request.user, "delete", chirp)

    chirp.delete()
    logger.info(f"User {request.user.pk}: deleted chirp {pk}")
    messages.success(request, "Chirp deleted.")
    return redirect("chirps:index")
