"""Cart API routes"""

from fastapi import APIRouter, HTTPException, Depends

from ..models.cart import (
    AddToCartRequest,
    CartChange,
    CartItemInput,
    CartResponse,
    CartView,
    UpdateCartItemRequest,
)
from ..core.config import settings
from ..core.dependencies import get_session, get_session_manager, get_store_db
from ..core.session import CustomerSession, SessionManager
from ..database.stores import StoreDatabase
from ..services.currency import format_currency

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def cart_view(session: CustomerSession) -> CartView:
    cart = session.cart
    subtotal = cart.get_total()
    return CartView(
        session_id=session.session_id,
        store_id=cart.store_id,
        items=cart.lines,
        item_count=cart.item_count,
        subtotal=subtotal,
        formatted_subtotal=format_currency(subtotal, settings.currency_symbol),
    )


@router.post("", response_model=CartResponse)
async def create_cart(manager: SessionManager = Depends(get_session_manager)):
    """Start a customer session with an empty cart"""
    session = manager.create_session()
    return CartResponse(cart=cart_view(session), message="Cart created")


@router.get("", response_model=CartResponse)
async def get_cart(session: CustomerSession = Depends(get_session)):
    """Get the session's cart"""
    return CartResponse(cart=cart_view(session))


@router.post("/items", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    session: CustomerSession = Depends(get_session),
    stores: StoreDatabase = Depends(get_store_db),
):
    """
    Add one unit of a product to the cart.

    Adding from a store other than the cart's current store replaces the
    cart; the response reports this with change="replaced" and lists the
    dropped items.
    """
    store = stores.get_store(request.store_id)
    if not store:
        raise HTTPException(status_code=404, detail="Store not found")

    product = stores.get_product(request.store_id, request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    if not product.in_stock:
        raise HTTPException(status_code=400, detail="This item is currently out of stock.")

    option = None
    if request.option_name:
        option = product.get_option(request.option_name)
        if not option:
            raise HTTPException(status_code=404, detail="Product option not found")

    item = CartItemInput.from_product(product, store_id=store.id, option=option)
    result = session.cart.add_to_cart(item)

    if result.change == CartChange.REPLACED:
        message = (
            f"Your cart had items from another store and was replaced with {item.name}"
        )
    else:
        message = f"{item.name} has been added to your cart."

    return CartResponse(
        cart=cart_view(session),
        change=result.change,
        replaced_items=result.replaced_lines,
        message=message,
    )


@router.put("/items/{item_id}", response_model=CartResponse)
async def update_cart_item(
    item_id: str,
    request: UpdateCartItemRequest,
    session: CustomerSession = Depends(get_session),
):
    """Set an item's quantity; zero or less removes it"""
    if not session.cart.get_line(item_id):
        raise HTTPException(status_code=404, detail="Item not in cart")

    session.cart.update_quantity(item_id, request.quantity)
    return CartResponse(cart=cart_view(session), message="Cart updated")


@router.delete("/items/{item_id}", response_model=CartResponse)
async def remove_from_cart(
    item_id: str,
    session: CustomerSession = Depends(get_session),
):
    """Remove an item from the cart"""
    session.cart.remove_from_cart(item_id)
    return CartResponse(cart=cart_view(session), message="Item removed")


@router.delete("", response_model=CartResponse)
async def clear_cart(session: CustomerSession = Depends(get_session)):
    """Clear all items from the cart"""
    session.cart.clear_cart()
    return CartResponse(cart=cart_view(session), message="Cart cleared")


@router.get("/reminders")
async def get_cart_reminders(session: CustomerSession = Depends(get_session)):
    """Pending abandoned cart reminders for the session"""
    return {
        "scheduled": session.reminders.is_scheduled,
        "last_updated": session.reminders.last_updated,
        "reminders": [
            {
                "hours": r.hours,
                "message": r.message,
                "due_at": r.due_at,
                "item_count": r.item_count,
            }
            for r in session.reminders.pending()
        ],
    }
