# services/checkout_service.py

from datetime import datetime

from liquorstore.models.cart import Cart
from liquorstore.models.order import Customer, Order, OrderTotals
from liquorstore.models.store import PickupSlot, StoreSettings
from liquorstore.services.exceptions import (CheckoutValidationError,
                                             UnknownCustomer)
from liquorstore.services.pickup_service import generate_slots
from liquorstore.services.pricing_service import OrderPricer
from liquorstore.utils.logger import get_logger

logger = get_logger("checkout")


class CheckoutService:
    def __init__(self, repo, cart: Cart, clock=datetime.now):
        # repo: DataRepository or FirestoreRepository
        # clock: zero-argument callable returning "now"; tests pin it
        self.repo = repo
        self.cart = cart
        self.clock = clock

    def load_settings(self) -> StoreSettings:
        return StoreSettings.from_record(self.repo.get_store_settings())

    def pickup_options(self, settings: StoreSettings | None = None) -> list[PickupSlot]:
        settings = settings or self.load_settings()
        return generate_slots(settings.business_hours, self.clock())

    def store_is_closed(self) -> bool:
        # "closed" is a state to render, not an error
        return not self.pickup_options()

    def order_summary(self) -> OrderTotals:
        return OrderPricer.from_settings(self.load_settings()).totals(self.cart.lines())

    def place_order(
        self,
        user_id: str,
        customer_name: str,
        customer_email: str,
        pickup_time: str,
        pickup_instructions: str = "",
    ) -> tuple[str, Order]:
        # Settings and "now" are read once, so the slots we validate against
        # are the ones the order is stamped with.
        settings = self.load_settings()
        now = self.clock()
        slots = generate_slots(settings.business_hours, now)
        pricer = OrderPricer.from_settings(settings)
        customer = Customer(name=customer_name or "", email=customer_email or "", user_id=user_id)

        try:
            order = pricer.build_order(
                customer,
                self.cart.lines(),
                chosen_slot=pickup_time,
                valid_slots=slots,
                now=now,
                pickup_instructions=pickup_instructions,
            )
        except CheckoutValidationError as e:
            logger.warning(f"checkout rejected for user {user_id}: {type(e).__name__}: {e.message}")
            raise

        # the profile must exist before the order is written
        if self.repo.get_user_profile(user_id) is None:
            logger.warning(f"checkout rejected: no profile for user {user_id}")
            raise UnknownCustomer(user_id)

        order_id = self.repo.create_order(order.to_record())
        # the store serialises the append, see append_order_to_history
        self.repo.append_order_to_history(user_id, order_id)

        self.cart.clear()
        logger.info(
            f"order {order_id} placed by {user_id}: {len(order.lines)} lines, "
            f"total {order.total}, pickup {order.pickup_time:%H:%M}"
        )
        return order_id, order
