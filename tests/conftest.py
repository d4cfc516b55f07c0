import pytest
from cobra import Model, Metabolite, Reaction

COMPARTMENTS = {'c': 'cytosol', 'm': 'mitochondria'}

METABOLITE_NAMES = {
    'pyr': 'Pyruvate',
    'accoa': 'Acetyl-CoA',
    'coa': 'Coenzyme A',
    'glc': 'D-Glucose',
    'g6p': 'D-Glucose 6-phosphate',
    'atp': 'ATP',
    'adp': 'ADP',
}


def build_model(model_id, reactions):
    """Build a cobra model from reaction identifiers, stoichiometries and bounds

    Stoichiometries map metabolite identifiers with compartment suffix (e.g.
    'pyr_c') to coefficients.
    """
    model = Model(model_id)
    metabolites = {}
    cobra_reactions = []
    for reac_id, stoichiometry, lower_bound, subsystem in reactions:
        reaction = Reaction(reac_id, name=reac_id + ' reaction', subsystem=subsystem, lower_bound=lower_bound,
                            upper_bound=1000.0)
        reac_mets = {}
        for met_id, coeff in stoichiometry.items():
            if met_id not in metabolites:
                compartment = met_id.rsplit('_', 1)[1]
                metabolites[met_id] = Metabolite(met_id,
                                                 name=METABOLITE_NAMES[met_id.rsplit('_', 1)[0]],
                                                 compartment=compartment)
            reac_mets[metabolites[met_id]] = coeff
        reaction.add_metabolites(reac_mets)
        cobra_reactions.append(reaction)
    model.add_reactions(cobra_reactions)
    model.compartments = {k: v for k, v in COMPARTMENTS.items() if any(m.compartment == k for m in metabolites.values())}
    return model


@pytest.fixture
def model_pyruvate():
    """Conversion of pyruvate in the cytosol and its transport into mitochondria"""
    return build_model('pyruvate', [
        ('R1', {'pyr_c': -1, 'accoa_c': 1}, 0.0, 'Pyruvate metabolism'),
        ('R2', {'pyr_c': -1, 'pyr_m': 1}, -1000.0, 'Transport, mitochondrial'),
    ])


@pytest.fixture
def model_pyruvate_coa():
    """Like model_pyruvate, with coenzyme A as second reactant of the conversion"""
    return build_model('pyruvate_coa', [
        ('R1', {'pyr_c': -1, 'coa_c': -1, 'accoa_c': 1}, 0.0, 'Pyruvate metabolism'),
        ('R2', {'pyr_c': -1, 'pyr_m': 1}, -1000.0, 'Transport, mitochondrial'),
    ])


@pytest.fixture
def model_replicates():
    """Hexokinase replicates with different reversibility and compartments"""
    hexokinase_c = {'glc_c': -1, 'atp_c': -1, 'g6p_c': 1, 'adp_c': 1}
    hexokinase_m = {'glc_m': -1, 'atp_m': -1, 'g6p_m': 1, 'adp_m': 1}
    return build_model('replicates', [
        ('HEX1', hexokinase_c, 0.0, 'Glycolysis'),
        ('HEX2', hexokinase_c, 0.0, 'Glycolysis'),
        ('HEX3', hexokinase_c, -1000.0, 'Glycolysis'),
        ('HEXm', hexokinase_m, 0.0, 'Glycolysis'),
    ])


@pytest.fixture
def model_case():
    """Replicates whose identifiers differ in case"""
    stoichiometry = {'pyr_c': -1, 'accoa_c': 1}
    return build_model('case', [
        ('r0', stoichiometry, 0.0, ''),
        ('R1', stoichiometry, 0.0, ''),
    ])


@pytest.fixture
def model_textbook():
    import cobra
    from pathlib import Path
    from cobra.io import read_sbml_model
    model_path = (Path(cobra.__path__[0]) / "data" / "textbook.xml.gz")
    return read_sbml_model(str(model_path.resolve()))
