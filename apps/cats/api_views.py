"""
apps.cats.api_views
~~~~~~~~~~~~~~~~~~~
Thin DRF API views for cats.  All business logic is delegated to
:mod:`apps.cats.services`; its errors are rendered by
:func:`common.exceptions.custom_exception_handler`.

Endpoints
---------
GET     /cats/        – List cats
POST    /cats/        – Create cat
GET     /cats/{id}/   – Retrieve cat
PATCH   /cats/{id}/   – Update cat (PUT accepted too)
DELETE  /cats/{id}/   – Delete cat
"""
from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .params import CatParams
from .serializers import CatSerializer, CatWriteSerializer, ViolationResponseSerializer


def _params_from(request: Request) -> CatParams:
    serializer = CatWriteSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    return CatParams.from_mapping(serializer.validated_data)


class CatApiListCreateView(APIView):
    """GET /cats/  –  POST /cats/"""

    @extend_schema(
        summary="List Cats",
        responses={200: CatSerializer(many=True)},
        tags=["Cats"],
    )
    def get(self, request: Request) -> Response:
        return Response(CatSerializer(services.list_cats(), many=True).data)

    @extend_schema(
        summary="Create Cat",
        description="Creates a cat.  Both name and breed must be non-blank.",
        request=CatWriteSerializer,
        responses={
            201: CatSerializer,
            422: ViolationResponseSerializer,
        },
        tags=["Cats"],
    )
    def post(self, request: Request) -> Response:
        cat = services.create_cat(params=_params_from(request))
        return Response(CatSerializer(cat).data, status=status.HTTP_201_CREATED)


class CatApiDetailView(APIView):
    """GET / PATCH / PUT / DELETE /cats/<pk>/"""

    @extend_schema(
        summary="Retrieve Cat",
        responses={
            200: CatSerializer,
            404: OpenApiResponse(description="Cat not found."),
        },
        tags=["Cats"],
    )
    def get(self, request: Request, pk: int) -> Response:
        return Response(CatSerializer(services.get_cat(pk)).data)

    @extend_schema(
        summary="Update Cat",
        description="Updates only the submitted fields of a cat.",
        request=CatWriteSerializer,
        responses={
            200: CatSerializer,
            404: OpenApiResponse(description="Cat not found."),
            422: ViolationResponseSerializer,
        },
        tags=["Cats"],
    )
    def patch(self, request: Request, pk: int) -> Response:
        cat = services.update_cat(pk, params=_params_from(request))
        return Response(CatSerializer(cat).data)

    @extend_schema(
        summary="Replace Cat",
        request=CatWriteSerializer,
        responses={
            200: CatSerializer,
            404: OpenApiResponse(description="Cat not found."),
            422: ViolationResponseSerializer,
        },
        tags=["Cats"],
    )
    def put(self, request: Request, pk: int) -> Response:
        return self.patch(request, pk)

    @extend_schema(
        summary="Delete Cat",
        responses={
            204: OpenApiResponse(description="Cat deleted."),
            404: OpenApiResponse(description="Cat not found."),
        },
        tags=["Cats"],
    )
    def delete(self, request: Request, pk: int) -> Response:
        services.delete_cat(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
