import json
import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from fluentjob.examples import CredentialsRetrying
from fluentjob.workflow import render_document


class CredentialsRetryingExampleTests(unittest.TestCase):
    def setUp(self) -> None:
        self.workflow = CredentialsRetrying().create()

    def test_workflow_collects_credentials_from_both_actions(self):
        self.assertEqual(self.workflow.name, "workflow-with-credentials")
        self.assertEqual(self.workflow.credentials.names(), ["hbase", "hcatalog", "hive2"])
        self.assertEqual(
            self.workflow.credentials.get("hcatalog").configuration,
            {
                "hcat.metastore.uri": "thrift://<host>:<port>",
                "hcat.metastore.principal": "hive/<host>@<realm>",
            },
        )

    def test_hive2_action_inherits_context_and_replaces_credentials(self):
        hive2 = self.workflow.get_action("hive2-action-with-hcatalog-and-hive2-credentials")

        self.assertEqual(hive2.kind, "hive2")
        self.assertEqual(hive2.payload.script, "call-hive2.sql")
        self.assertEqual(hive2.context.resource_manager, "${resourceManager}")
        self.assertEqual(hive2.context.name_node, "${nameNode}")
        self.assertEqual(hive2.credential_names, ["hcatalog", "hive2"])
        self.assertEqual(
            (hive2.retry_policy.interval, hive2.retry_policy.max, hive2.retry_policy.policy),
            (1, 3, "exponential"),
        )
        self.assertEqual([parent.name for parent in hive2.parents], ["shell-with-hbase-credential"])


class RenderDocumentTests(unittest.TestCase):
    def test_document_layout(self):
        workflow = CredentialsRetrying().create()
        document = render_document(workflow)

        self.assertEqual(document, workflow.to_dict())
        self.assertEqual(document["name"], "workflow-with-credentials")
        self.assertEqual(
            document["credentials"][1],
            {
                "name": "hcatalog",
                "type": "hcatalog",
                "configuration": [
                    {"key": "hcat.metastore.uri", "value": "thrift://<host>:<port>"},
                    {"key": "hcat.metastore.principal", "value": "hive/<host>@<realm>"},
                ],
            },
        )

        shell, hive2 = document["actions"]
        self.assertEqual(shell["name"], "shell-with-hbase-credential")
        self.assertEqual(shell["shell"]["executable"], "call-hbase.sh")
        self.assertEqual(shell["credentials"], ["hbase"])
        self.assertNotIn("retry", shell)
        self.assertEqual(shell["children"], ["hive2-action-with-hcatalog-and-hive2-credentials"])

        self.assertEqual(hive2["kind"], "hive2")
        self.assertEqual(hive2["retry"], {"interval": 1, "max": 3, "policy": "exponential"})
        self.assertEqual(hive2["credentials"], ["hcatalog", "hive2"])
        self.assertEqual(hive2["parents"], ["shell-with-hbase-credential"])
        self.assertEqual(hive2["context"]["resource_manager"], "${resourceManager}")

    def test_document_is_json_serializable(self):
        document = CredentialsRetrying().create().to_dict()
        self.assertEqual(json.loads(json.dumps(document)), document)


if __name__ == "__main__":
    unittest.main()
