from .topology import Node, Element, edge_element, hex_element, ELEMENT_DIMS
__all__=['Node','Element','edge_element','hex_element','ELEMENT_DIMS']
