import graphene

from .catalog.schema import CatalogQueries
from .inventory.schema import InventoryMutations, InventoryQueries
from .order.schema import OrderMutations, OrderQueries
from .practice.schema import PracticeMutations, PracticeQueries
from .receiving.schema import ReceivingMutations, ReceivingQueries


class Query(
    CatalogQueries,
    InventoryQueries,
    OrderQueries,
    PracticeQueries,
    ReceivingQueries,
):
    pass


class Mutation(
    InventoryMutations,
    OrderMutations,
    PracticeMutations,
    ReceivingMutations,
):
    pass


schema = graphene.Schema(query=Query, mutation=Mutation)
