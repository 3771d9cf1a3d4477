from adaptive_lights.experiments.runner import run_single, run_parameter_sweep


__all__ = ["run_single", "run_parameter_sweep"]
