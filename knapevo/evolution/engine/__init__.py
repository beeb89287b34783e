from __future__ import annotations

from knapevo.evolution.engine.config import RunConfig
from knapevo.evolution.engine.context import RunContext
from knapevo.evolution.engine.core import EvolutionEngine, solve_knapsack
from knapevo.evolution.engine.metrics import EngineMetrics
from knapevo.evolution.engine.models import BestSolution, KnapsackSolution
from knapevo.evolution.engine.state import RunState
