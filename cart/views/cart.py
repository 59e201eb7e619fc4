# cart/views/cart.py

"""
CART API (authenticated)

- GET    /api/cart/
- DELETE /api/cart/
- POST   /api/cart/items/
- PATCH  /api/cart/items/<item_id>/
- DELETE /api/cart/items/<item_id>/
- GET    /api/cart/summary/?shipping_method=<id>&coupon=<code>
"""

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from cart.serializers import AddCartItemSerializer, CartSerializer, UpdateCartItemSerializer
from cart.services import add_item, cart_lines, clear_cart, get_cart, remove_item, update_item
from orders.services.totals import compute_totals, price_lines, resolve_shipping_method


class CartView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: CartSerializer})
    def get(self, request):
        return Response(CartSerializer.for_cart(get_cart(request.user)).data, status=status.HTTP_200_OK)

    @extend_schema(responses={200: CartSerializer})
    def delete(self, request):
        clear_cart(request.user)
        return Response(CartSerializer.for_cart(get_cart(request.user)).data, status=status.HTTP_200_OK)


class CartItemsView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(request=AddCartItemSerializer, responses={201: CartSerializer})
    def post(self, request):
        serializer = AddCartItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        cart = add_item(
            user=request.user,
            product_id=data["product_id"],
            quantity=data["quantity"],
            variant_id=data.get("variant_id"),
            selected_options=data.get("selected_options"),
        )
        return Response(CartSerializer.for_cart(cart).data, status=status.HTTP_201_CREATED)


class CartItemDetailView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(request=UpdateCartItemSerializer, responses={200: CartSerializer})
    def patch(self, request, item_id):
        serializer = UpdateCartItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        cart = update_item(
            user=request.user,
            item_id=item_id,
            quantity=serializer.validated_data["quantity"],
        )
        return Response(CartSerializer.for_cart(cart).data, status=status.HTTP_200_OK)

    @extend_schema(responses={200: CartSerializer})
    def delete(self, request, item_id):
        cart = remove_item(user=request.user, item_id=item_id)
        return Response(CartSerializer.for_cart(cart).data, status=status.HTTP_200_OK)


class CartSummaryView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        parameters=[
            OpenApiParameter(name="shipping_method", type=str, required=False),
            OpenApiParameter(name="coupon", type=str, required=False),
        ],
        responses={200: OpenApiResponse(description="{subtotal, shipping, discount, total, unavailable_items, ...}")},
    )
    def get(self, request):
        # lines whose product was deactivated or whose variant was removed are
        # left out of the totals and listed so the client can drop them
        unavailable = []
        lines = price_lines(cart_lines(get_cart(request.user)), unavailable=unavailable)
        method = resolve_shipping_method(request.query_params.get("shipping_method"))

        totals = compute_totals(
            lines=lines,
            shipping_method=method,
            coupon_code=request.query_params.get("coupon"),
            user=request.user,
        )
        data = totals.as_dict()
        data["unavailable_items"] = [str(item["item_id"]) for item in unavailable]
        return Response(data, status=status.HTTP_200_OK)
