from rest_framework import serializers


class PriceTierSerializer(serializers.Serializer):
    tier = serializers.CharField()
    minQty = serializers.IntegerField(source="min_qty")
    price = serializers.CharField()


class VariantSerializer(serializers.Serializer):
    id = serializers.CharField()
    price = serializers.CharField()
    images = serializers.ListField(child=serializers.CharField())
    label = serializers.CharField(allow_null=True)
    sku = serializers.CharField(allow_null=True)


class ProductSerializer(serializers.Serializer):
    id = serializers.CharField()
    slug = serializers.CharField()
    name = serializers.CharField()
    images = serializers.ListField(child=serializers.CharField())
    tiers = PriceTierSerializer(many=True, allow_null=True)
    collectionSlug = serializers.CharField(source="collection_slug", allow_null=True)
    collectionName = serializers.CharField(source="collection_name", allow_null=True)
    listPrice = serializers.CharField(source="list_price")
    variants = VariantSerializer(many=True)


class VariantTypeSerializer(serializers.Serializer):
    id = serializers.CharField()
    type = serializers.CharField()
    label = serializers.CharField()


class VariantValueSerializer(serializers.Serializer):
    id = serializers.CharField()
    value = serializers.CharField()
    colorValue = serializers.CharField(source="color_value", allow_null=True)
    variantType = VariantTypeSerializer(source="variant_type")


class CombinationSerializer(serializers.Serializer):
    variantValue = VariantValueSerializer(source="variant_value")


class ProductVariantDetailSerializer(serializers.Serializer):
    id = serializers.CharField()
    price = serializers.CharField()
    images = serializers.ListField(child=serializers.CharField())
    combinations = CombinationSerializer(many=True)
    sku = serializers.CharField(allow_null=True)


class ProductDetailSerializer(serializers.Serializer):
    id = serializers.CharField()
    slug = serializers.CharField()
    name = serializers.CharField()
    summary = serializers.CharField(allow_null=True)
    images = serializers.ListField(child=serializers.CharField())
    tiers = PriceTierSerializer(many=True, allow_null=True)
    collectionSlug = serializers.CharField(source="collection_slug", allow_null=True)
    collectionName = serializers.CharField(source="collection_name", allow_null=True)
    variants = ProductVariantDetailSerializer(many=True)


class CollectionSerializer(serializers.Serializer):
    id = serializers.CharField()
    slug = serializers.CharField()
    name = serializers.CharField()


class CollectionDetailSerializer(CollectionSerializer):
    products = ProductSerializer(many=True)
