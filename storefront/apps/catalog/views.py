from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from .services import catalog_store
from .services.facets import CatalogFacets


class CatalogView(APIView):
    """Anyone may browse the catalog; only staff may change it."""

    def get_permissions(self):
        if self.request.method in ('GET', 'HEAD', 'OPTIONS'):
            return [AllowAny()]
        return [IsAdminUser()]


# ─────────────────────────────────────────
#  Product listing and admin create
# ─────────────────────────────────────────
class ProductListView(CatalogView):

    def get(self, request):
        params = request.query_params
        products = catalog_store.list_products(
            category=params.get('category'),
            brand=params.get('brand'),
            availability_status=params.get('availability_status'),
            search=params.get('search'),
        )
        return Response([catalog_store.product_to_dict(p) for p in products])

    def post(self, request):
        product = catalog_store.create_product(request.data)
        return Response({'success': True, 'product': catalog_store.product_to_dict(product)}, status=201)


# ─────────────────────────────────────────
#  Single product: detail and admin edits
# ─────────────────────────────────────────
class ProductDetailView(CatalogView):

    def get(self, request, product_id):
        product = catalog_store.get_product(product_id)
        return Response(catalog_store.product_to_dict(product))

    def put(self, request, product_id):
        product = catalog_store.update_product(product_id, request.data)
        return Response({'success': True, 'product': catalog_store.product_to_dict(product)})

    def patch(self, request, product_id):
        product = catalog_store.update_product(product_id, request.data, partial=True)
        return Response({'success': True, 'product': catalog_store.product_to_dict(product)})

    def delete(self, request, product_id):
        catalog_store.delete_product(product_id)
        return Response({'success': True})


class ProductFacetsView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(CatalogFacets().get_facets())
