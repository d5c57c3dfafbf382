from data_designer.plugins.plugin import Plugin, PluginType

context_analyzer_plugin = Plugin(
    config_qualified_name="data_designer_context_analyzer.config.ContextAnalyzerColumnConfig",
    impl_qualified_name="data_designer_context_analyzer.generator.ContextAnalyzerColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
