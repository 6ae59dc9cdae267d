import graphene

from ...catalog.queries import find_item_by_gtin
from ..core import ResolveInfo
from ..core.utils import get_reader_context
from .types import Item


class CatalogQueries(graphene.ObjectType):
    item_by_gtin = graphene.Field(
        Item,
        gtin=graphene.Argument(graphene.String, required=True),
        description="Look up the practice's item for a scanned barcode.",
    )

    @staticmethod
    def resolve_item_by_gtin(_root, info: ResolveInfo, *, gtin):
        context = get_reader_context(info)
        return find_item_by_gtin(gtin, practice_id=context.practice_id)
