"""Test the extraction of metabolic entities from cobra models."""
import pytest
from cobra import Metabolite, Reaction
import netsimplify as ns
from netsimplify.names import *


def test_metabolite_identifier():
    assert (ns.extract_metabolite_identifier(Metabolite('pyr_c', compartment='c')) == 'pyr')
    assert (ns.extract_metabolite_identifier(Metabolite('glc__D_e', compartment='e')) == 'glc__D')
    assert (ns.extract_metabolite_identifier(Metabolite('x', compartment='c')) == 'x')
    assert (ns.extract_metabolite_identifier(Metabolite('_c', compartment='c')) == '_c')
    assert (ns.extract_metabolite_identifier(Metabolite('pyr_m', compartment='c')) == 'pyr_m')


def test_conversion_and_transports():
    conversion = (ns.Participant('pyr', 'c', REACTANT), ns.Participant('accoa', 'c', PRODUCT))
    transport = (ns.Participant('pyr', 'c', REACTANT), ns.Participant('pyr', 'm', PRODUCT))
    cotransport = (ns.Participant('pyr', 'c', REACTANT), ns.Participant('h', 'c', REACTANT),
                   ns.Participant('pyr', 'm', PRODUCT), ns.Participant('h', 'm', PRODUCT))
    assert ns.determine_reaction_chemical_conversion(conversion)
    assert not ns.determine_reaction_chemical_conversion(transport)
    assert not ns.determine_reaction_chemical_conversion(cotransport)
    assert (ns.collect_reaction_transports(conversion) == ())
    assert (ns.collect_reaction_transports(transport) == (ns.Transport('pyr', ('c', 'm')), ))
    assert (ns.collect_reaction_transports(cotransport) == (ns.Transport('pyr', ('c', 'm')), ns.Transport('h',
                                                                                                          ('c', 'm'))))


def test_extraction_pyruvate(model_pyruvate):
    entities = ns.extract_metabolic_entities(model_pyruvate)
    assert (set(entities.reactions) == {'R1', 'R2'})
    assert (set(entities.metabolites) == {'pyr', 'accoa'})
    assert (entities.metabolites['pyr'].name == 'Pyruvate')
    assert (entities.compartments['c'].name == 'cytosol')
    assert (entities.compartments['m'].name == 'mitochondria')
    r1 = entities.reactions['R1']
    assert (set(r1.participants) == {ns.Participant('pyr', 'c', REACTANT), ns.Participant('accoa', 'c', PRODUCT)})
    assert r1.conversion and not r1.transport and not r1.reversibility
    r2 = entities.reactions['R2']
    assert not r2.conversion and r2.transport and r2.reversibility
    assert (r2.transports == (ns.Transport('pyr', ('c', 'm')), ))
    assert (r2.metabolites == ['pyr'])
    assert (set(r2.compartments) == {'c', 'm'})
    assert (entities.processes == ['Pyruvate metabolism', 'Transport, mitochondrial'])


def test_extraction_replicates(model_replicates):
    entities = ns.extract_metabolic_entities(model_replicates)
    assert (entities.reactions['HEX1'].replicates == ('HEX2', 'HEX3', 'HEXm'))
    assert (entities.reactions['HEXm'].replicates == ('HEX1', 'HEX2', 'HEX3'))
    assert entities.reactions['HEX3'].reversibility
    assert (len(entities.metabolites) == 4)


def test_extraction_skips_empty_reactions(model_pyruvate):
    model_pyruvate.add_reactions([Reaction('EMPTY')])
    entities = ns.extract_metabolic_entities(model_pyruvate)
    assert ('EMPTY' not in entities.reactions)
    assert (len(entities.reactions) == 2)


def test_replicates_ignore_compartments():
    participants = {
        'A': (ns.Participant('pyr', 'c', REACTANT), ns.Participant('accoa', 'c', PRODUCT)),
        'B': (ns.Participant('pyr', 'm', REACTANT), ns.Participant('accoa', 'm', PRODUCT)),
        'C': (ns.Participant('accoa', 'c', REACTANT), ns.Participant('pyr', 'c', PRODUCT)),
    }
    replicates = ns.identify_replicate_reactions(participants)
    assert (replicates == {'A': ('B', ), 'B': ('A', ), 'C': ()})
