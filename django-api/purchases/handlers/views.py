"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details

Gateway failures are not caught here; Django turns them into a 500.
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from purchases.domain.errors import InvalidPurchaseError
from purchases.handlers.serializers import PurchaseOutcomeSerializer, PurchaseRequestSerializer
from purchases.services import build_purchase_service


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = build_purchase_service()
        try:
            outcome = service.purchase_tickets(
                serializer.validated_data["account_id"], serializer.line_items()
            )
        except InvalidPurchaseError as exc:
            return Response(
                {"code": exc.code.value, "message": exc.message},
                status=status.HTTP_400_BAD_REQUEST,
            )

        return Response(PurchaseOutcomeSerializer(outcome).data, status=status.HTTP_201_CREATED)
