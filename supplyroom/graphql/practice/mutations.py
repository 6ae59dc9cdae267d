import graphene

from ...practice.locations import create_location, delete_location, update_location
from ..core import ResolveInfo
from ..core.mutations import BaseMutation
from ..core.types import LocationError
from .types import Location


class LocationInput(graphene.InputObjectType):
    name = graphene.String(description="Name of the location.")
    description = graphene.String()
    parent_id = graphene.ID(description="Location to nest this one under.")


class LocationCreate(BaseMutation):
    location = graphene.Field(Location)

    class Arguments:
        input = LocationInput(required=True)

    class Meta:
        description = "Create a storage location."
        error_type_class = LocationError
        error_type_field = "location_errors"

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        data = data["input"]
        location = create_location(
            context,
            name=data.get("name") or "",
            description=data.get("description") or "",
            parent_id=data.get("parent_id"),
        )
        return LocationCreate(location=location)


class LocationUpdate(BaseMutation):
    location = graphene.Field(Location)

    class Arguments:
        id = graphene.ID(required=True)
        input = LocationInput(required=True)
        clear_parent = graphene.Boolean(
            default_value=False, description="Make the location top-level."
        )

    class Meta:
        description = "Rename or move a storage location."
        error_type_class = LocationError
        error_type_field = "location_errors"

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        location_data = data["input"]
        location = update_location(
            context,
            data["id"],
            name=location_data.get("name"),
            description=location_data.get("description"),
            parent_id=location_data.get("parent_id"),
            clear_parent=data["clear_parent"],
        )
        return LocationUpdate(location=location)


class LocationDelete(BaseMutation):
    location_id = graphene.ID(description="ID of the deleted location.")

    class Arguments:
        id = graphene.ID(required=True)

    class Meta:
        description = "Delete a location nothing refers to anymore."
        error_type_class = LocationError
        error_type_field = "location_errors"

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        delete_location(context, data["id"])
        return LocationDelete(location_id=data["id"])
