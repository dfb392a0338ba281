"""
Tests for the stack-wide tagging program.

Validates:
1. main() registers the transformation before returning the sink
2. The applied tags are exported
"""

from unittest.mock import patch

from infra_tags.__main__ import main


class TestStackProgram:
    """Tests for the Pulumi program entry point."""

    @patch("infra_tags.__main__.pulumi.export")
    @patch("infra_tags.components.sinks.pulumi.runtime.register_stack_transformation")
    @patch("infra_tags.__main__.get_tag_context")
    def test_main_registers_and_exports(self, mock_context, mock_register, mock_export, base_context):
        """main() installs the transformation and exports the tags."""
        mock_context.return_value = base_context

        sink = main()

        mock_register.assert_called_once_with(sink.transform)
        mock_export.assert_called_once_with("tags", sink.tags)
        assert sink.tags["app.name"] == "basemaps"
        assert sink.tags["responder.team"] == "NotSet"
