import graphene

from ..core import ResolveInfo


class Location(graphene.ObjectType):
    id = graphene.ID(required=True)
    name = graphene.String(required=True)
    description = graphene.String(required=True)
    parent = graphene.Field(lambda: Location, description="Enclosing location.")
    children = graphene.List(
        graphene.NonNull(lambda: Location),
        required=True,
        description="Sub-locations directly inside this location.",
    )

    class Meta:
        description = "Physical storage place inside a practice."

    @staticmethod
    def resolve_parent(root, info: ResolveInfo):
        return root.parent

    @staticmethod
    def resolve_children(root, info: ResolveInfo):
        return root.children.all()
