"""
Community Garden Backend — Repository Layer
============================================

What:  Data access objects, one per entity, owning every SQL statement.
Why:   Services stay free of query construction and driver exceptions.
How:   A repository wraps one AsyncSession. Driver failures are rolled back
       and re-raised as StoreError; nothing else is caught.

Repository Inventory:
    - PlotRepository: find_all, find_by_id, find_by_status, save
"""
