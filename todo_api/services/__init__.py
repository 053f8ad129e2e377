# Services package init
"""
Todo API — Services Layer
===========================

Service Inventory:
    - TodoStore: create/read/update/delete access to the todo_items table,
      bound to one request-scoped session (see get_todo_store).
"""
