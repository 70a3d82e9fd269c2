"""
apps.cats.views
~~~~~~~~~~~~~~~
HTML views for cats.  All business logic is delegated to
:mod:`apps.cats.services`.

Endpoints
---------
GET     /cats/            – index
POST    /cats/            – create
GET     /cats/new/        – new form
GET     /cats/{id}/       – show
PATCH   /cats/{id}/       – update (PUT accepted too)
DELETE  /cats/{id}/       – destroy
GET     /cats/{id}/edit/  – edit form

Forms reach PATCH and DELETE by posting a hidden ``_method`` field (see
:class:`common.middleware.HttpMethodOverrideMiddleware`).  Every handler
either renders a page or redirects.
"""
from __future__ import annotations

from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views import View

from common.exceptions import NotFoundError, ValidationError
from . import services
from .params import CatParams

#: Notice shown on the index page after a successful delete.
DELETED_MESSAGE = "You deleted a cat!"


def _get_cat_or_404(pk: int):
    try:
        return services.get_cat(pk)
    except NotFoundError as exc:
        raise Http404(str(exc)) from exc


class CatListCreateView(View):
    """GET /cats/  –  POST /cats/"""

    def get(self, request: HttpRequest) -> HttpResponse:
        return render(request, "cats/index.html", {"cats": services.list_cats()})

    def post(self, request: HttpRequest) -> HttpResponse:
        params = CatParams.from_request(request)
        try:
            cat = services.create_cat(params=params)
        except ValidationError as exc:
            request.flash.now["errors"] = exc.errors
            return render(
                request,
                "cats/new.html",
                {"cat": services.build_cat(params)},
                status=exc.status_code,
            )
        return redirect("cats:detail", pk=cat.pk)


class CatNewView(View):
    """GET /cats/new/"""

    def get(self, request: HttpRequest) -> HttpResponse:
        return render(request, "cats/new.html", {"cat": services.build_cat()})


class CatDetailView(View):
    """GET / PATCH / PUT / DELETE /cats/<pk>/"""

    def get(self, request: HttpRequest, pk: int) -> HttpResponse:
        return render(request, "cats/show.html", {"cat": _get_cat_or_404(pk)})

    def patch(self, request: HttpRequest, pk: int) -> HttpResponse:
        params = CatParams.from_request(request)
        try:
            cat = services.update_cat(pk, params=params)
        except NotFoundError as exc:
            raise Http404(str(exc)) from exc
        except ValidationError as exc:
            # Re-render with what was submitted; the stored row is unchanged.
            cat = _get_cat_or_404(pk)
            params.apply_to(cat)
            request.flash.now["errors"] = exc.errors
            return render(request, "cats/edit.html", {"cat": cat}, status=exc.status_code)
        return redirect("cats:detail", pk=cat.pk)

    def put(self, request: HttpRequest, pk: int) -> HttpResponse:
        return self.patch(request, pk)

    def delete(self, request: HttpRequest, pk: int) -> HttpResponse:
        try:
            services.delete_cat(pk)
        except NotFoundError as exc:
            raise Http404(str(exc)) from exc
        request.flash["message"] = DELETED_MESSAGE
        return redirect("cats:index")


class CatEditView(View):
    """GET /cats/<pk>/edit/"""

    def get(self, request: HttpRequest, pk: int) -> HttpResponse:
        return render(request, "cats/edit.html", {"cat": _get_cat_or_404(pk)})
