"""Provider integrations.

Each subpackage holds one provider's configuration class and a
``get_<provider>_actions(config=None)`` factory. Shared HTTP and
configuration plumbing lives in ``flashlib.providers.core``.
"""
