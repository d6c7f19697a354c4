"""A workflow with a credentials section and a retrying action.

``WorkflowBuilder.with_credentials`` is not called here, so the declared
credentials are collected from the actions: hbase from the shell action,
hcatalog and hive2 from the hive2 action. Passing an explicit
``Credentials`` value instead would declare exactly that set.
"""

from __future__ import annotations

from ..action import Hive2ActionBuilder, ShellActionBuilder
from ..credentials import CredentialBuilder
from ..factory import WorkflowFactory
from ..workflow import Workflow, WorkflowBuilder


class CredentialsRetrying(WorkflowFactory):
    def create(self) -> Workflow:
        hbase_credential = CredentialBuilder.create().with_name("hbase").with_type("hbase").build()

        hcatalog_credential = (
            CredentialBuilder.create()
            .with_name("hcatalog")
            .with_type("hcatalog")
            .with_configuration_entry("hcat.metastore.uri", "thrift://<host>:<port>")
            .with_configuration_entry("hcat.metastore.principal", "hive/<host>@<realm>")
            .build()
        )

        hive2_credential = (
            CredentialBuilder.create()
            .with_name("hive2")
            .with_type("hive2")
            .with_configuration_entry("jdbcUrl", "jdbc://<host>/<database>")
            .build()
        )

        shell_action_with_hbase = (
            ShellActionBuilder.create()
            .with_name("shell-with-hbase-credential")
            .with_credential(hbase_credential)
            .with_resource_manager("${resourceManager}")
            .with_name_node("${nameNode}")
            .with_executable("call-hbase.sh")
            .build()
        )

        (
            Hive2ActionBuilder.create_from_existing_action(shell_action_with_hbase)
            .with_parent(shell_action_with_hbase)
            .with_name("hive2-action-with-hcatalog-and-hive2-credentials")
            .clear_credentials()
            .with_credential(hcatalog_credential)
            .with_credential(hive2_credential)
            .with_retry_interval(1)
            .with_retry_max(3)
            .with_retry_policy("exponential")
            .with_script("call-hive2.sql")
            .build()
        )

        return (
            WorkflowBuilder()
            .with_name("workflow-with-credentials")
            .with_dag_containing_node(shell_action_with_hbase)
            .build()
        )
