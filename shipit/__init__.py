"""shipit: package, provision and deploy a project from one CLI."""

__version__ = "0.3.0"
