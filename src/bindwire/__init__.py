from bindwire.bindings import Binding, BindingBuilder
from bindwire.container import Container
from bindwire.context import CreationContext, InjectionArgument
from bindwire.exceptions import (
    BindwireAmbiguousBindingError,
    BindwireConfigurationError,
    BindwireContainerDisposedError,
    BindwireCycleDetectedError,
    BindwireDependencyInferenceError,
    BindwireError,
    BindwireIncompatibleImplementationError,
    BindwireIncompatibleInstanceError,
    BindwireInvalidInjectionTargetError,
    BindwireMemberInjectionError,
    BindwireResolutionError,
    BindwireUnresolvedParameterError,
)
from bindwire.host import HostObjectFactory
from bindwire.lifetime import Lifetime
from bindwire.markers import Maybe, inject

__all__ = [
    "Binding",
    "BindingBuilder",
    "BindwireAmbiguousBindingError",
    "BindwireConfigurationError",
    "BindwireContainerDisposedError",
    "BindwireCycleDetectedError",
    "BindwireDependencyInferenceError",
    "BindwireError",
    "BindwireIncompatibleImplementationError",
    "BindwireIncompatibleInstanceError",
    "BindwireInvalidInjectionTargetError",
    "BindwireMemberInjectionError",
    "BindwireResolutionError",
    "BindwireUnresolvedParameterError",
    "Container",
    "CreationContext",
    "HostObjectFactory",
    "InjectionArgument",
    "Lifetime",
    "Maybe",
    "inject",
]
