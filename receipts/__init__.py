"""
Receipts app

Hosts the receipt printing framework (``receipts.printing``) and the
``print_receipt`` management command.
"""
