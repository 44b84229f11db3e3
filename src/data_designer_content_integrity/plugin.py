from data_designer.plugins.plugin import Plugin, PluginType

content_integrity_plugin = Plugin(
    config_qualified_name="data_designer_content_integrity.config.ContentIntegrityColumnConfig",
    impl_qualified_name="data_designer_content_integrity.generator.ContentIntegrityColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
