"""
career_path — AI Career Learning Path Generator
================================================
Package containing the path generators, data models, configuration,
guardrails and session state for the learning path demo.

Module map
----------
  models.py            ExperienceLevel / StepType enums, LearningStep model.
  config.py            Settings loaded from .env; mock vs live detection,
                       logging setup.
  errors.py            CareerPathError hierarchy.
  guardrails.py        Goal validation (BLOCK) + path sanity checks (WARN).
  render.py            HTML step cards for the Streamlit page.
  path_generator.py    PathGenerator strategy: MockPathGenerator (canned path)
                       and LivePathGenerator (OpenAI structured output).
  session.py           PathSession: Idle → Submitting → Success | Failed.

Request flow
------------
  streamlit_app.py form → PathSession.submit()
  → InputGuardrails [G-01..G-03] → PathGenerator.generate()
  → OutputGuardrails [G-04..G-06] → rendered path
"""
__version__ = "0.1.0"
