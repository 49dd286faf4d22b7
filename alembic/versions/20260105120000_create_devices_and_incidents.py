"""create devices and incidents tables

Revision ID: 20260105120000
Revises:
Create Date: 2026-01-05 12:00:00

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20260105120000"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # name sem unique: a unicidade é só lógica (merge/autofill)
    op.create_table(
        "devices",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("sn", sa.String(length=128), nullable=False, server_default=""),
        sa.Column("model", sa.String(length=128), nullable=True),
        sa.Column("ip", sa.String(length=64), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )
    op.create_index("ix_devices_name", "devices", ["name"])

    # device é cópia do nome (sem FK para devices)
    op.create_table(
        "incidents",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("incident_time", sa.DateTime(timezone=False), nullable=False),
        sa.Column("device", sa.String(length=255), nullable=False),
        sa.Column("ip", sa.String(length=64), nullable=True),
        sa.Column("sn", sa.String(length=128), nullable=True),
        sa.Column("alert_source", sa.String(length=64), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("reason", sa.Text, nullable=True),
        sa.Column("resolution", sa.Text, nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )
    op.create_index("ix_incidents_incident_time", "incidents", ["incident_time"])
    op.create_index("ix_incidents_device", "incidents", ["device"])
    op.create_index("ix_incidents_status", "incidents", ["status"])


def downgrade():
    op.drop_index("ix_incidents_status", table_name="incidents")
    op.drop_index("ix_incidents_device", table_name="incidents")
    op.drop_index("ix_incidents_incident_time", table_name="incidents")
    op.drop_table("incidents")
    op.drop_index("ix_devices_name", table_name="devices")
    op.drop_table("devices")
