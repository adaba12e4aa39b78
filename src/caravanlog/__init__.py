# Import main lazily to avoid circular dependencies
def __getattr__(name):
    if name == "main":
        from caravanlog.cli.main import main
        return main
    if name == "CaravanSession":
        from caravanlog.session import CaravanSession
        return CaravanSession
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
