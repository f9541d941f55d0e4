"""
Variantman signals.

Signals:
    selection_changed:
        Sent after ProductView.handle_option_change() actually changes
        the selection. Re-selecting the current value sends nothing.

        Kwargs:
            sender: ProductView class
            view: The ProductView instance
            option_name: str -- the option that changed
            value: str -- the newly selected value
            selected: Mapping[str, str] -- read-only snapshot of the selection

        Handlers must not call handle_option_change() on the same view.

        Example handler::

            from variantman.signals import selection_changed

            def on_selection_changed(sender, view, option_name, value, **kwargs):
                logger.debug("%s: %s=%s", view.product.slug, option_name, value)

            selection_changed.connect(on_selection_changed)

    add_to_cart_requested:
        Sent by the default SignalCartBackend for every add-to-cart that
        passed the eligibility gate. Other backends may not send it.

        Kwargs:
            sender: ProductView class
            product: Product being viewed
            item: Resolved Variant, or the Product when variant-less
            qty: int -- always 1

        Example handler::

            from variantman.signals import add_to_cart_requested

            def on_add(sender, product, item, qty, **kwargs):
                toast("Added %s" % product.title)

            add_to_cart_requested.connect(on_add)
"""

from django.dispatch import Signal

selection_changed = Signal()
add_to_cart_requested = Signal()
