from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.validation import require_mapping

from .services import checkout, order_store


# ─────────────────────────────────────────
#  Order history and checkout
# ─────────────────────────────────────────
class OrderListView(APIView):

    def get(self, request):
        return Response(order_store.list_for_user(request.user.id))

    def post(self, request):
        data = require_mapping(request.data)
        order, items = checkout.place_order(
            request.user.id,
            shipping_address=data.get('shipping_address'),
            billing_address=data.get('billing_address'),
            payment_method=data.get('payment_method'),
            notes=data.get('notes'),
        )
        return Response({'success': True, 'order': order_store.order_to_dict(order, items)})


class OrderDetailView(APIView):

    def get(self, request, order_id):
        return Response(order_store.get_one(request.user.id, order_id))
