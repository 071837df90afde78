from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.validation import require_mapping

from .services import cart_store


class CartView(APIView):

    def get(self, request):
        return Response(cart_store.list_lines(request.user.id))

    def post(self, request):
        data = require_mapping(request.data)
        item = cart_store.upsert_line(
            request.user.id,
            data.get('product_id'),
            data.get('quantity'),
            data.get('price'),
        )
        return Response({'success': True, 'item': item})


class CartLineView(APIView):

    def put(self, request, line_id):
        data = require_mapping(request.data)
        item = cart_store.update_quantity(request.user.id, line_id, data.get('quantity'))
        return Response({'success': True, 'item': item})

    def delete(self, request, line_id):
        cart_store.remove_line(request.user.id, line_id)
        return Response({'success': True})


class CartSummaryView(APIView):

    def get(self, request):
        return Response(cart_store.cart_summary(request.user.id))
