"""
Geography — Views

Read-only ViewSets over the query services. Each resource exposes a
paginated listing, a lookup by code, and listings of its children.

@file geography/views.py
"""

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from core.exceptions import ResourceNotFoundError

from .permissions import ReadOnly
from .serializers import (
    DistrictSerializer,
    FindQuerySerializer,
    IslandFindQuerySerializer,
    IslandSerializer,
    ProvinceSerializer,
    RegencySerializer,
    SortQuerySerializer,
    VillageSerializer,
)
from .services import (
    DistrictService,
    IslandService,
    ProvinceService,
    RegencyService,
    VillageService,
)


class ResourceViewSet(viewsets.ViewSet):
    """
    Base ViewSet: ``service_class`` answers the queries,
    ``query_serializer_class`` coerces the listing parameters,
    ``serializer_class`` renders the records.
    """

    permission_classes = [ReadOnly]
    service_class = None
    serializer_class = None
    query_serializer_class = FindQuerySerializer
    lookup_field = 'code'
    # Malformed codes must reach the service so they fail as INVALID_FORMAT.
    lookup_value_regex = '[^/]+'

    def get_service(self):
        return self.service_class()

    def list(self, request):
        query = self.query_serializer_class(data=request.query_params)
        query.is_valid(raise_exception=True)

        result = self.get_service().find(**query.to_service_kwargs())
        return Response({
            'success': True,
            'data': self.serializer_class(result.data, many=True).data,
            'meta': result.meta.as_dict(),
        })

    def retrieve(self, request, code=None):
        record = self.get_service().find_by_code(code)
        if record is None:
            raise ResourceNotFoundError(detail=f'No {self.service_class.model._meta.verbose_name} with code {code}.')
        return Response({'success': True, 'data': self.serializer_class(record).data})

    def list_children(self, request, code, relation, serializer_class):
        query = SortQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        records = self.get_service().find_children(code, relation, **query.to_service_kwargs())
        if records is None:
            raise ResourceNotFoundError(detail=f'No {self.service_class.model._meta.verbose_name} with code {code}.')
        return Response({'success': True, 'data': serializer_class(records, many=True).data})


class ProvinceViewSet(ResourceViewSet):
    service_class = ProvinceService
    serializer_class = ProvinceSerializer

    @action(detail=True, methods=['get'], url_path='regencies')
    def regencies(self, request, code=None):
        return self.list_children(request, code, 'regencies', RegencySerializer)


class RegencyViewSet(ResourceViewSet):
    service_class = RegencyService
    serializer_class = RegencySerializer

    @action(detail=True, methods=['get'], url_path='districts')
    def districts(self, request, code=None):
        return self.list_children(request, code, 'districts', DistrictSerializer)

    @action(detail=True, methods=['get'], url_path='islands')
    def islands(self, request, code=None):
        return self.list_children(request, code, 'islands', IslandSerializer)


class DistrictViewSet(ResourceViewSet):
    service_class = DistrictService
    serializer_class = DistrictSerializer

    @action(detail=True, methods=['get'], url_path='villages')
    def villages(self, request, code=None):
        return self.list_children(request, code, 'villages', VillageSerializer)


class VillageViewSet(ResourceViewSet):
    service_class = VillageService
    serializer_class = VillageSerializer


class IslandViewSet(ResourceViewSet):
    service_class = IslandService
    serializer_class = IslandSerializer
    query_serializer_class = IslandFindQuerySerializer
