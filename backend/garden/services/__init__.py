# Services package init
"""
Community Garden Backend — Services Layer
==========================================

What:  Business layer between routes (HTTP) and repositories (SQL).
Why:   Routes handle HTTP, services handle use cases, repositories handle queries.
How:   Services receive a repository at construction; FastAPI builds one per
       request through the get_*_service dependencies.

Service Inventory:
    - PlotService: get_all_plots, get_plot, save_plot
"""
