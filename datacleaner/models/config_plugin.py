"""
Plugin configuration model.

Generic (plugin, name, value) store shared by every plugin.  Cleaners keep
their rows under the ``cleaner_<name>`` plugin namespace.
"""

from sqlalchemy import Column, Index, Integer, String, Text, UniqueConstraint

from datacleaner.database import Base


class ConfigPlugin(Base):
    __tablename__ = "config_plugins"

    id = Column(Integer, primary_key=True, index=True)
    plugin = Column(String(100), nullable=False, default="core")
    name = Column(String(100), nullable=False)
    value = Column(Text, nullable=True)

    __table_args__ = (
        UniqueConstraint("plugin", "name", name="uq_config_plugins_plugin_name"),
        Index("idx_config_plugins_name", "name"),
    )

    def __repr__(self) -> str:
        return f"<ConfigPlugin {self.plugin}/{self.name}={self.value!r}>"
