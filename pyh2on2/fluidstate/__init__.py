from .fluidstate import CompositionalFluidState
