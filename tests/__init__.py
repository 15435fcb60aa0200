"""
Excel Online Harness Test Suite

Test categories:
- unit/ - action primitives, page objects and settings against mocks
- e2e/  - real browser against locally routed fake pages, plus the live
          Excel Online scenario
"""
