from dataclasses import dataclass, field


@dataclass
class Registry:
    """A central registry mapping account config classes to account classes."""
    accounts: dict = field(default_factory=dict)

registry = Registry()

def register_account(config_cls):
    """Decorator to register an account class with its config class."""
    def decorator(cls):
        registry.accounts[config_cls.__name__] = cls
        return cls
    return decorator
