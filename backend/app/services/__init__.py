# Services package init
"""
Inkpost Backend — Services Layer
==================================

Service Inventory:
    - PostStore:   Gateway over the posts table (insert, find, replace, delete)
    - PostService: Payload validation, search predicate, not-found and
                   store-failure mapping
"""
