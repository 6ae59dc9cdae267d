import graphene

from ...core.tenancy import scoped
from ...practice.models import Location as LocationModel
from ..core import ResolveInfo
from ..core.types import NonNullList
from ..core.utils import get_reader_context
from .mutations import LocationCreate, LocationDelete, LocationUpdate
from .types import Location


class PracticeQueries(graphene.ObjectType):
    locations = NonNullList(
        Location, required=True, description="Storage locations of the practice."
    )

    @staticmethod
    def resolve_locations(_root, info: ResolveInfo):
        context = get_reader_context(info)
        return scoped(LocationModel.objects.all(), practice_id=context.practice_id)


class PracticeMutations(graphene.ObjectType):
    location_create = LocationCreate.Field()
    location_update = LocationUpdate.Field()
    location_delete = LocationDelete.Field()
