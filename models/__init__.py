from models.herd import FreshYear, HealthEvent, HerdInputs, round_half_up
from models.scenario import EfficacyScenario, ScenarioBreakdown, ScenarioResult
