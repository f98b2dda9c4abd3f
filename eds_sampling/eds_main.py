import os
import logging

from .data_loader import DataLoader
from .pipeline_controller import DEFAULT_CONFIG, PipelineController
from .visualization import save_visualization

logger = logging.getLogger(__name__)


def run(config):
    """按配置加载数据、构造EDS并保存结果"""
    loader = DataLoader(config.get('base_path', '.'))
    data, vepsilon = loader.load_data(config['data_file'], config['epsilon_file'])

    controller = PipelineController({k: config[k] for k in DEFAULT_CONFIG if k in config})
    result = controller.run(data, vepsilon)

    prefix = config.get('output_prefix', os.path.splitext(config['data_file'])[0])
    loader.save_results(result, prefix)

    if config.get('visualize', False):
        figure = os.path.join(loader.base_path, prefix + '_EDS.png')
        save_visualization(data, result, figure)
        logger.info("可视化结果已保存到 %s", figure)

    return result


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    config = {
        'base_path': 'eds_results',
        'data_file': 'simulated_data.csv',
        'epsilon_file': 'simulated_epsilon.csv',
        'output_prefix': 'simulated',
        'visualize': True,
        'show_progress': True,
    }

    # 运行流水线
    run(config)
