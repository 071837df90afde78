from rest_framework.response import Response
from rest_framework.views import APIView

from .services import address_book


class AddressListView(APIView):

    def get(self, request):
        addresses = address_book.list_addresses(request.user.id)
        return Response([address_book.address_to_dict(a) for a in addresses])

    def post(self, request):
        address = address_book.create_address(request.user.id, request.data)
        return Response({'success': True, 'address': address_book.address_to_dict(address)})


class AddressDetailView(APIView):

    def get(self, request, address_id):
        address = address_book.get_address(request.user.id, address_id)
        return Response(address_book.address_to_dict(address))

    def put(self, request, address_id):
        address = address_book.update_address(request.user.id, address_id, request.data)
        return Response({'success': True, 'address': address_book.address_to_dict(address)})

    def delete(self, request, address_id):
        address_book.delete_address(request.user.id, address_id)
        return Response({'success': True})
