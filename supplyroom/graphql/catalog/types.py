import graphene


class Product(graphene.ObjectType):
    id = graphene.ID(required=True)
    name = graphene.String(required=True)
    brand = graphene.String(required=True)
    gtin = graphene.String(description="GS1 barcode number of the product.")

    class Meta:
        description = "Shared catalog product."


class Supplier(graphene.ObjectType):
    id = graphene.ID(required=True)
    name = graphene.String(required=True)
    email = graphene.String(required=True)
    phone = graphene.String(required=True)
    account_number = graphene.String(required=True)

    class Meta:
        description = "Supplier a practice orders from."


class Item(graphene.ObjectType):
    id = graphene.ID(required=True)
    name = graphene.String(required=True)
    sku = graphene.String(required=True)
    unit = graphene.String(required=True)
    product = graphene.Field(Product, required=True)
    default_supplier = graphene.Field(Supplier)

    class Meta:
        description = "A product as stocked by the practice."
