from wrappers.site import Site


class DemoSite(Site):
    pass
